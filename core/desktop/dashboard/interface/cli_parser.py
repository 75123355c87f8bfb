"""CLI parser construction for the dashdeck TUI."""

import argparse
from typing import Any, Mapping

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser(commands: Any, themes: Mapping[str, Any]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dashdeck",
        description="dashdeck: bookmarks, calendar, tasks and VirtualBox machines in one terminal dashboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", help="path to the YAML config (default: ~/.dashdeck_config.yaml)")
    parser.add_argument("--theme", choices=list(themes.keys()), help="colour palette")
    parser.add_argument("--bookmarks", help="bookmark JSON file")
    parser.add_argument("--log-file", help="write logs to this file (rotated at 2 MB)")
    parser.add_argument("--log-level", default="WARNING", type=str.upper, choices=LOG_LEVELS)
    parser.add_argument("--version", action="store_true", help="print the version and exit")
    parser.set_defaults(func=commands.cmd_tui)

    sub = parser.add_subparsers(dest="command")

    tui_p = sub.add_parser("tui", help="run the dashboard (default)")
    tui_p.set_defaults(func=commands.cmd_tui)

    auth_p = sub.add_parser("auth", help="store the fallback Google access token in the user config")
    auth_p.add_argument("--token", required=True, help="access token; an empty value clears it")
    auth_p.set_defaults(func=commands.cmd_auth)

    return parser
