#!/usr/bin/env python3
"""Full-screen prompt_toolkit shell around the dashboard router."""

import logging
import os
from typing import Optional, Tuple

from prompt_toolkit.application import Application
from prompt_toolkit.data_structures import Point
from prompt_toolkit.filters import Condition
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl

from core.desktop.dashboard.interface.tui_canvas import Canvas
from core.desktop.dashboard.interface.tui_keys import KeyEvent, key_events_from_press
from core.desktop.dashboard.interface.tui_router import Router
from core.desktop.dashboard.interface.tui_themes import DEFAULT_THEME, build_style
from core.errors import LaunchError

logger = logging.getLogger("dashdeck.app")


class DashboardTUI:
    def __init__(self, router: Router, theme: str = DEFAULT_THEME, input=None, output=None):
        self.router = router
        self.theme_name = theme
        self.style = build_style(theme)
        self._cursor: Optional[Tuple[int, int]] = None

        kb = KeyBindings()
        kb.timeout = 0

        # Every key goes through the router; prompt_toolkit only reads the terminal.
        @kb.add(Keys.Any, eager=True)
        def _(event):
            self.dispatch(event)

        @kb.add("c-c", eager=True)
        def _(event):
            event.app.exit()

        self.frame_control = FormattedTextControl(
            self.get_frame_text,
            focusable=True,
            show_cursor=True,
            get_cursor_position=self._cursor_position,
        )
        self.main_window = Window(
            content=self.frame_control,
            always_hide_cursor=Condition(lambda: self._cursor is None),
            wrap_lines=False,
        )

        self.app = Application(
            layout=Layout(self.main_window),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
            input=input,
            output=output,
        )
        # Esc is a command here, so don't wait for a possible escape sequence.
        try:
            self.app.ttimeoutlen = max(0.0, float(os.getenv("DASHDECK_TUI_TTIMEOUTLEN", "0.05")))
        except ValueError:
            self.app.ttimeoutlen = 0.05

    def handle_key(self, key_event: KeyEvent) -> bool:
        return self.router.handle_key(key_event)

    def dispatch(self, event) -> None:
        for key_press in event.key_sequence:
            for key_event in key_events_from_press(key_press):
                try:
                    running = self.handle_key(key_event)
                except LaunchError as exc:
                    logger.error("launch failed: %s", exc)
                    self.app.exit(exception=exc)
                    return
                if not running:
                    self.app.exit()
                    return

    def frame_size(self) -> Tuple[int, int]:
        size = self.app.output.get_size()
        return size.columns, size.rows

    def get_frame_text(self) -> FormattedText:
        width, height = self.frame_size()
        canvas = Canvas(width, height)
        self.router.render(canvas)
        self._cursor = canvas.cursor_point()
        return canvas.to_formatted_text()

    def _cursor_position(self) -> Point:
        if self._cursor is None:
            return Point(x=0, y=0)
        x, y = self._cursor
        return Point(x=x, y=y)

    def run(self) -> None:
        self.app.run()
