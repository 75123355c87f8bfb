#!/usr/bin/env python3
"""
dashdeck.py: keyboard-driven terminal dashboard.

Wires the configured stores and services into the four controllers and
hands the router to the prompt_toolkit shell.
"""

import logging
import sys
from importlib.metadata import PackageNotFoundError, version as pkg_version
from logging.handlers import RotatingFileHandler
from pathlib import Path
from types import SimpleNamespace
from typing import Dict, List, Optional

import requests

from config import Settings, load_settings, set_user_token
from core.desktop.dashboard.interface.cli_parser import build_parser as build_cli_parser
from core.desktop.dashboard.interface.tui_app import DashboardTUI
from core.desktop.dashboard.interface.tui_bookmarks import BookmarksController
from core.desktop.dashboard.interface.tui_controller import ResourceController
from core.desktop.dashboard.interface.tui_machines import MachinesController
from core.desktop.dashboard.interface.tui_router import Router
from core.desktop.dashboard.interface.tui_schedule import ScheduleController
from core.desktop.dashboard.interface.tui_tasks import TasksController
from core.desktop.dashboard.interface.tui_themes import THEMES
from core.errors import LaunchError
from core.modes import ControllerId, TabMode
from infrastructure.bookmark_repository import FileBookmarkRepository
from infrastructure.google import GoogleCalendarService, GoogleRestClient, GoogleTasksService, TokenFileCredentials
from infrastructure.launcher import BrowserLauncher
from infrastructure.virtualbox import VBoxManageAdapter

logger = logging.getLogger("dashdeck.app")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_MAX_BYTES = 2_000_000
LOG_BACKUPS = 2


def configure_logging(log_file: Optional[Path], level: str = "WARNING") -> logging.Handler:
    """Route ``dashdeck.*`` loggers to a rotating file; the terminal belongs to the UI."""
    root = logging.getLogger("dashdeck")
    root.setLevel(logging.DEBUG)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = RotatingFileHandler(
            log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()
    handler.setLevel(getattr(logging, (level or "WARNING").upper(), logging.WARNING))
    root.addHandler(handler)
    return handler


def resolve_tabs(names: List[str]) -> List[TabMode]:
    tabs: List[TabMode] = []
    for name in names:
        try:
            tab = TabMode.from_string(name)
        except ValueError:
            logger.warning("ignoring unknown tab %r", name)
            continue
        if tab not in tabs:
            tabs.append(tab)
    return tabs or list(TabMode)


def build_router(settings: Settings, session: Optional[requests.Session] = None) -> Router:
    """Construct adapters and controllers for the configured tabs; every controller loads here."""
    tabs = resolve_tabs(settings.tabs)
    launcher = BrowserLauncher(settings.browser)
    controllers: Dict[ControllerId, ResourceController] = {
        ControllerId.BOOKMARKS: BookmarksController(FileBookmarkRepository(settings.bookmark_path), launcher),
    }
    if TabMode.SCHEDULE in tabs or TabMode.TASKS in tabs:
        client = GoogleRestClient(
            session or requests.Session(),
            TokenFileCredentials(settings.token_path, fallback=settings.token),
            timeout=settings.request_timeout,
        )
        if TabMode.SCHEDULE in tabs:
            service = GoogleCalendarService(client, settings.utc_offset, settings.time_zone)
            controllers[ControllerId.SCHEDULE] = ScheduleController(service, launcher)
        if TabMode.TASKS in tabs:
            controllers[ControllerId.TASKS] = TasksController(GoogleTasksService(client), launcher, settings.tasks_url)
    if TabMode.VIRTUALBOX in tabs:
        controllers[ControllerId.VIRTUALBOX] = MachinesController(VBoxManageAdapter(settings.vboxmanage))
    return Router(controllers, tabs)


def cmd_tui(args) -> int:
    settings = args.settings
    try:
        tui = DashboardTUI(build_router(settings), theme=settings.theme)
        tui.run()
    except LaunchError as exc:
        logger.error("dashboard stopped: %s", exc)
        print(f"dashdeck: {exc}", file=sys.stderr)
        return 1
    return 0


def cmd_auth(args) -> int:
    value = (args.token or "").strip()
    set_user_token(value, Path(args.config).expanduser() if args.config else None)
    print("token saved" if value else "token cleared")
    return 0


def apply_overrides(settings: Settings, args) -> Settings:
    if getattr(args, "theme", None):
        settings.theme = args.theme
    if getattr(args, "bookmarks", None):
        settings.bookmark_path = Path(args.bookmarks).expanduser()
    if getattr(args, "log_file", None):
        settings.log_file = Path(args.log_file).expanduser()
    return settings


def build_parser():
    commands = SimpleNamespace(cmd_tui=cmd_tui, cmd_auth=cmd_auth)
    return build_cli_parser(commands, THEMES)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "version", False):
        try:
            print(pkg_version("dashdeck"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    config_path = Path(args.config).expanduser() if args.config else None
    args.settings = apply_overrides(load_settings(config_path), args)
    configure_logging(args.settings.log_file, args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
