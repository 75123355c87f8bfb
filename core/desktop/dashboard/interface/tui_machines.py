from typing import List

from application.ports import MachineManager
from core.desktop.dashboard.interface.help_texts import VIRTUALBOX_HELP
from core.desktop.dashboard.interface.tui_controller import ResourceController
from core.items import VirtualMachineItem
from core.modes import ControllerId


class MachinesController(ResourceController):
    """Registered VirtualBox machines, listed once; Enter starts the selected one."""

    controller_id = ControllerId.VIRTUALBOX
    TITLE = "VirtualBox"
    HELP_TITLE = "Help VirtualBox"
    HELP_LINES = VIRTUALBOX_HELP
    SUPPORTS_RELOAD = False
    SUPPORTS_DELETE = False

    def __init__(self, manager: MachineManager):
        self.manager = manager
        super().__init__()

    def _load(self) -> List[VirtualMachineItem]:
        return self.manager.list_machines()

    def _open(self, item: VirtualMachineItem) -> None:
        self.manager.start_machine(item.name)
