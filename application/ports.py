from typing import List, Protocol

from core.items import BookmarkItem, ScheduleItem, TaskItem, VirtualMachineItem


class BookmarkRepository(Protocol):
    def load(self) -> List[BookmarkItem]:
        ...

    def save(self, bookmarks: List[BookmarkItem]) -> None:
        ...


class ScheduleService(Protocol):
    def list_events(self) -> List[ScheduleItem]:
        ...

    def create_event(self, summary: str, start: str, end: str, description: str) -> bool:
        ...

    def update_event(self, event_id: str, summary: str, start: str, end: str, description: str) -> bool:
        ...

    def delete_event(self, event_id: str) -> bool:
        ...


class TaskService(Protocol):
    def list_tasks(self) -> List[TaskItem]:
        ...

    def create_task(self, title: str, notes: str, due: str) -> bool:
        ...

    def update_task(self, task: TaskItem) -> bool:
        ...

    def delete_task(self, task_id: str) -> bool:
        ...


class MachineManager(Protocol):
    def list_machines(self) -> List[VirtualMachineItem]:
        ...

    def start_machine(self, name: str) -> None:
        ...


class Launcher(Protocol):
    def open_url(self, url: str) -> None:
        ...
