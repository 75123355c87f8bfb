"""Footer renderer for the dashboard router."""

from typing import List, Sequence, Tuple

from core.modes import ModalState, WindowMode

BASE_HINTS = (
    ("Quit", "Esc"),
    ("Open/Close Help", "F1"),
    ("Bookmark", "F5"),
    ("Tab", "F6"),
)
TAB_HINTS = (("Move Tab", "Tab"),)
HELP_HINTS = (("Close Help", "F1, Esc"),)
FORM_HINTS = (
    ("Next Field", "Tab, Down"),
    ("Previous Field", "Up, Shift+Tab"),
    ("Save", "F12"),
    ("Cancel", "Esc"),
)


def _hints(router) -> Sequence[Tuple[str, str]]:
    state = router.active_controller.state
    if state is ModalState.HELP:
        return HELP_HINTS
    if state.is_form:
        return FORM_HINTS
    if router.window_mode is WindowMode.TAB and len(router.tabs) > 1:
        return BASE_HINTS + TAB_HINTS
    return BASE_HINTS


def build_footer_fragments(router) -> List[Tuple[str, str]]:
    parts: List[Tuple[str, str]] = [("class:footer", "  ")]
    for index, (label, keys) in enumerate(_hints(router)):
        if index:
            parts.append(("class:footer", ", "))
        parts.append(("class:footer", f"{label}: "))
        parts.append(("class:footer.key", keys))
    return parts


__all__ = ["build_footer_fragments"]
