from dataclasses import replace
from typing import Dict, List

from application.ports import Launcher, TaskService
from config import DEFAULT_TASKS_URL
from core.desktop.dashboard.interface.help_texts import TASK_HELP
from core.desktop.dashboard.interface.tui_controller import KeyOutcome, ResourceController
from core.desktop.dashboard.interface.tui_forms import TaskForm
from core.desktop.dashboard.interface.tui_keys import KeyEvent
from core.items import TASK_COMPLETED, TaskItem
from core.modes import ControllerId


class TasksController(ResourceController):
    """Incomplete remote tasks; ``C`` marks the selected one completed."""

    controller_id = ControllerId.TASKS
    TITLE = "Task"
    HELP_TITLE = "Help Task"
    HELP_LINES = TASK_HELP
    FORM_CLASS = TaskForm

    def __init__(self, service: TaskService, launcher: Launcher, tasks_url: str = DEFAULT_TASKS_URL):
        self.service = service
        self.launcher = launcher
        self.tasks_url = tasks_url
        super().__init__()

    def _load(self) -> List[TaskItem]:
        return self.service.list_tasks()

    def _open(self, item: TaskItem) -> None:
        # tasks have no per-item page, the web task list is opened instead
        self.launcher.open_url(self.tasks_url)

    def form_values(self, item: TaskItem) -> Dict[str, str]:
        return {"title": item.title, "notes": item.notes, "due": item.due}

    def _create(self, values: Dict[str, str]) -> None:
        self.service.create_task(values["title"], values["notes"], values["due"])

    def _update(self, index: int, item: TaskItem, values: Dict[str, str]) -> None:
        updated = replace(item, title=values["title"], notes=values["notes"], due=values["due"])
        self.items[index] = updated
        self.service.update_task(updated)

    def _remove(self, index: int, item: TaskItem) -> None:
        self.service.delete_task(item.id)

    def complete(self) -> None:
        item = self.selected()
        if item is None:
            return
        done = replace(item, status=TASK_COMPLETED)
        self.items[self.list.index] = done
        self.service.update_task(done)
        self.reload()

    def _extra_key(self, event: KeyEvent) -> KeyOutcome:
        if event.is_key("C"):
            self.complete()
            return KeyOutcome.HANDLED
        return KeyOutcome.IGNORED
