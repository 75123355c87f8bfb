"""Router and controller state enums.

The dashboard has two levels of mode: the router picks which controller owns
the keyboard (``WindowMode`` + ``TabMode``), each controller then picks which
of its surfaces receives the event (``ModalState``).
"""

from enum import Enum
from typing import Dict


class WindowMode(Enum):
    BOOKMARK = "bookmark"
    TAB = "tab"


class TabMode(Enum):
    SCHEDULE = "schedule"
    TASKS = "tasks"
    VIRTUALBOX = "virtualbox"

    @classmethod
    def from_string(cls, value: str) -> "TabMode":
        token = (value or "").strip().lower()
        for mode in cls:
            if mode.value == token:
                return mode
        raise ValueError(f"Unknown tab: {value!r}")


class ControllerId(Enum):
    BOOKMARKS = "bookmarks"
    SCHEDULE = "schedule"
    TASKS = "tasks"
    VIRTUALBOX = "virtualbox"


class ModalState(Enum):
    BASE = "base"
    HELP = "help"
    FORM_NEW = "form_new"
    FORM_EDIT = "form_edit"

    @property
    def is_form(self) -> bool:
        return self in (ModalState.FORM_NEW, ModalState.FORM_EDIT)


class FormMode(Enum):
    NEW = "new"
    EDIT = "edit"


TAB_POSITIONS: Dict[TabMode, int] = {
    TabMode.SCHEDULE: 0,
    TabMode.TASKS: 1,
    TabMode.VIRTUALBOX: 2,
}

TAB_CONTROLLERS: Dict[TabMode, ControllerId] = {
    TabMode.SCHEDULE: ControllerId.SCHEDULE,
    TabMode.TASKS: ControllerId.TASKS,
    TabMode.VIRTUALBOX: ControllerId.VIRTUALBOX,
}

TAB_LABELS: Dict[TabMode, str] = {
    TabMode.SCHEDULE: "Schedule",
    TabMode.TASKS: "Task",
    TabMode.VIRTUALBOX: "VirtualBox",
}

for _table in (TAB_POSITIONS, TAB_CONTROLLERS, TAB_LABELS):
    _missing = set(TabMode) - set(_table)
    if _missing:
        raise RuntimeError(f"tab table incomplete: {sorted(m.value for m in _missing)}")


def tab_position(tab: TabMode) -> int:
    return TAB_POSITIONS[tab]


def derive_active(window_mode: WindowMode, tab_mode: TabMode) -> ControllerId:
    """Return the single controller whose pane is highlighted for this router state."""
    if window_mode is WindowMode.BOOKMARK:
        return ControllerId.BOOKMARKS
    return TAB_CONTROLLERS[tab_mode]


__all__ = [
    "WindowMode",
    "TabMode",
    "ControllerId",
    "ModalState",
    "FormMode",
    "TAB_POSITIONS",
    "TAB_CONTROLLERS",
    "TAB_LABELS",
    "tab_position",
    "derive_active",
]
