from .errors import DashdeckError, LaunchError, RemoteServiceError
from .items import (
    BookmarkItem,
    ScheduleItem,
    TaskItem,
    VirtualMachineItem,
    TASK_COMPLETED,
    TASK_NEEDS_ACTION,
)
from .modes import (
    WindowMode,
    TabMode,
    ControllerId,
    ModalState,
    FormMode,
    derive_active,
    tab_position,
)

__all__ = [
    # Errors
    "DashdeckError",
    "LaunchError",
    "RemoteServiceError",
    # Items
    "BookmarkItem",
    "ScheduleItem",
    "TaskItem",
    "VirtualMachineItem",
    "TASK_COMPLETED",
    "TASK_NEEDS_ACTION",
    # Modes
    "WindowMode",
    "TabMode",
    "ControllerId",
    "ModalState",
    "FormMode",
    "derive_active",
    "tab_position",
]
