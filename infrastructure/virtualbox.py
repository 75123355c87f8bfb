import logging
import subprocess
from typing import Callable, List, Optional

from application.ports import MachineManager
from core.errors import LaunchError
from core.items import VirtualMachineItem

logger = logging.getLogger("dashdeck.virtualbox")


def parse_vm_list(output: str) -> List[VirtualMachineItem]:
    """Extract the first double-quoted name from each ``VBoxManage list vms`` line."""
    machines: List[VirtualMachineItem] = []
    for line in (output or "").splitlines():
        start = line.find('"')
        if start < 0:
            continue
        end = line.find('"', start + 1)
        if end < 0:
            continue
        machines.append(VirtualMachineItem(name=line[start + 1:end]))
    return machines


class VBoxManageAdapter(MachineManager):
    def __init__(
        self,
        executable: str = "VBoxManage",
        runner: Optional[Callable[..., subprocess.CompletedProcess]] = None,
        spawner: Optional[Callable[..., subprocess.Popen]] = None,
    ) -> None:
        self.executable = executable
        self.runner = runner or subprocess.run
        self.spawner = spawner or subprocess.Popen

    def list_machines(self) -> List[VirtualMachineItem]:
        try:
            result = self.runner(
                [self.executable, "list", "vms"],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            logger.warning("Unable to list virtual machines via %s: %s", self.executable, exc)
            return []
        if result.returncode != 0:
            logger.warning("%s list vms exited with %s", self.executable, result.returncode)
        return parse_vm_list(result.stdout or "")

    def start_machine(self, name: str) -> None:
        try:
            self.spawner(
                [self.executable, "startvm", name, "--type", "gui"],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as exc:
            raise LaunchError(f"Failed to start virtual machine {name!r}: {exc}") from exc
