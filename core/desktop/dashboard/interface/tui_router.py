"""Routes key events to one controller and lays the dashboard out."""

import logging
from typing import Dict, List, Mapping, Optional, Sequence

from core.desktop.dashboard.interface.tui_canvas import Canvas, Rect
from core.desktop.dashboard.interface.tui_controller import KeyOutcome, ResourceController
from core.desktop.dashboard.interface.tui_footer import build_footer_fragments
from core.desktop.dashboard.interface.tui_keys import KEY_F5, KEY_F6, KEY_TAB, KeyEvent
from core.modes import TAB_CONTROLLERS, TAB_LABELS, ControllerId, TabMode, WindowMode, derive_active, tab_position

logger = logging.getLogger("dashdeck.app")

WINDOW_KEYS: Dict[str, WindowMode] = {
    KEY_F5: WindowMode.BOOKMARK,
    KEY_F6: WindowMode.TAB,
}
BOOKMARK_PERCENT = 20
TAB_HEADER_HEIGHT = 3
FOOTER_HEIGHT = 1
TAB_SEPARATOR = " │ "


class Router:
    """Owns ``(WindowMode, TabMode)`` and nothing else.

    Controllers keep their own lists, selections and forms; the router only
    forwards events and reads ``state`` to decide whether mode keys apply.
    """

    def __init__(
        self,
        controllers: Mapping[ControllerId, ResourceController],
        tabs: Optional[Sequence[TabMode]] = None,
        window_mode: WindowMode = WindowMode.TAB,
    ):
        ordered: List[TabMode] = []
        for tab in tabs if tabs is not None else list(TabMode):
            if tab not in ordered:
                ordered.append(tab)
        if not ordered:
            raise ValueError("at least one tab is required")
        self.tabs = sorted(ordered, key=tab_position)
        self.controllers: Dict[ControllerId, ResourceController] = dict(controllers)
        required = [ControllerId.BOOKMARKS] + [TAB_CONTROLLERS[tab] for tab in self.tabs]
        missing = [cid.value for cid in required if cid not in self.controllers]
        if missing:
            raise ValueError(f"missing controllers: {', '.join(missing)}")
        self.window_mode = window_mode
        self.tab_mode = self.tabs[0]
        self.running = True
        self.sync_panes()

    @property
    def active_id(self) -> ControllerId:
        return derive_active(self.window_mode, self.tab_mode)

    @property
    def active_controller(self) -> ResourceController:
        return self.controllers[self.active_id]

    def next_tab(self) -> None:
        index = self.tabs.index(self.tab_mode)
        self.tab_mode = self.tabs[(index + 1) % len(self.tabs)]

    def handle_key(self, event: KeyEvent) -> bool:
        """Route one event; returns False once the dashboard should exit."""
        controller = self.active_controller
        if event.code in WINDOW_KEYS and controller.is_base:
            self.window_mode = WINDOW_KEYS[event.code]
        elif event.code == KEY_TAB and self.window_mode is WindowMode.TAB and controller.is_base:
            self.next_tab()
        elif controller.key_binding(event) is KeyOutcome.LEAVE:
            logger.debug("leave requested from %s", self.active_id.value)
            self.running = False
        self.sync_panes()
        return self.running

    def sync_panes(self) -> None:
        active = self.active_id
        for controller_id, controller in self.controllers.items():
            controller.pane.active = controller_id is active

    # ---- drawing -----------------------------------------------------

    def _render_tabs(self, canvas: Canvas, area: Rect) -> None:
        canvas.draw_box(area, "  Tabs  ", "class:border")
        inner = area.inner()
        if inner.is_empty:
            return
        x = inner.x + 1
        for index, tab in enumerate(self.tabs):
            if index:
                x += canvas.put_text(x, inner.y, TAB_SEPARATOR, "class:border", inner.right - x)
            style = "class:tab.active" if tab is self.tab_mode else "class:tab"
            x += canvas.put_text(x, inner.y, TAB_LABELS[tab], style, inner.right - x)

    def render(self, canvas: Canvas) -> None:
        body, footer = canvas.area.split_rows([None, FOOTER_HEIGHT])
        bookmark_area, tab_area = body.split_columns_percent([BOOKMARK_PERCENT, 100 - BOOKMARK_PERCENT])
        self.controllers[ControllerId.BOOKMARKS].render(canvas, bookmark_area)
        header, content = tab_area.split_rows([TAB_HEADER_HEIGHT, None])
        self._render_tabs(canvas, header)
        self.controllers[TAB_CONTROLLERS[self.tab_mode]].render(canvas, content)
        canvas.put_fragments(footer.x, footer.y, build_footer_fragments(self), footer.width)
        for controller in self.controllers.values():
            controller.render_overlays(canvas)
