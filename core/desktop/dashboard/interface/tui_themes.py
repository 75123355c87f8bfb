#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "selected": "#9ad974 bold",  # selected rows stay green like the list marker
        "header": "#ffb347 bold",
        "border": "#4b525a",
        "border.active": "#e5c07b bold",
        "tab": "#97a0a9",
        "tab.active": "bg:#3b3b3b #ffb347 bold",
        "footer": "#6d717a",
        "footer.key": "#e5c07b",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "selected": "#b8f171 bold",
        "header": "#ffb347 bold",
        "border": "#5a6169",
        "border.active": "#f0c674 bold",
        "tab": "#a7b0ba",
        "tab.active": "bg:#3d4047 #ffb347 bold",
        "footer": "#6f757d",
        "footer.key": "#f0c674",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    palette = get_theme_palette(theme)
    return Style.from_dict(palette)
