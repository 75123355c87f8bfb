from typing import Dict, List

from application.ports import Launcher, ScheduleService
from core.desktop.dashboard.interface.help_texts import SCHEDULE_HELP
from core.desktop.dashboard.interface.tui_controller import ResourceController
from core.desktop.dashboard.interface.tui_forms import ScheduleForm
from core.items import ScheduleItem
from core.modes import ControllerId


class ScheduleController(ResourceController):
    """Calendar events for today and tomorrow; re-read after every write."""

    controller_id = ControllerId.SCHEDULE
    TITLE = "Schedule"
    HELP_TITLE = "Help Schedule"
    HELP_LINES = SCHEDULE_HELP
    FORM_CLASS = ScheduleForm

    def __init__(self, service: ScheduleService, launcher: Launcher):
        self.service = service
        self.launcher = launcher
        super().__init__()

    def _load(self) -> List[ScheduleItem]:
        return self.service.list_events()

    def _open(self, item: ScheduleItem) -> None:
        if item.link:
            self.launcher.open_url(item.link)

    def form_values(self, item: ScheduleItem) -> Dict[str, str]:
        return {
            "summary": item.summary,
            "start": item.start,
            "end": item.end,
            "description": item.description,
        }

    def _create(self, values: Dict[str, str]) -> None:
        self.service.create_event(values["summary"], values["start"], values["end"], values["description"])

    def _update(self, index: int, item: ScheduleItem, values: Dict[str, str]) -> None:
        self.service.update_event(item.id, values["summary"], values["start"], values["end"], values["description"])

    def _remove(self, index: int, item: ScheduleItem) -> None:
        self.service.delete_event(item.id)
