from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class BookmarkItem:
    title: str
    url: str

    def summary_text(self) -> str:
        return self.title

    def to_dict(self) -> Dict[str, str]:
        return {"title": self.title, "url": self.url}

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "BookmarkItem":
        # both keys are required and must be strings
        title = raw["title"]
        url = raw["url"]
        if not isinstance(title, str) or not isinstance(url, str):
            raise ValueError("bookmark title/url must be strings")
        return cls(title=title, url=url)


@dataclass(frozen=True)
class ScheduleItem:
    id: str
    summary: str
    start: str
    end: str
    link: str = ""
    description: str = ""

    def summary_text(self) -> str:
        return f"{self.summary}\n  {self.start} - {self.end}"

    @classmethod
    def from_event(cls, event: Dict[str, Any]) -> "ScheduleItem":
        """Map a calendar event resource onto the fields the dashboard shows."""
        start = event.get("start") or {}
        end = event.get("end") or {}
        return cls(
            id=str(event.get("id", "")),
            summary=event.get("summary") or "No summary",
            start=start.get("dateTime") or start.get("date") or "No start time",
            end=end.get("dateTime") or end.get("date") or "No end time",
            link=str(event.get("htmlLink", "")),
            description=event.get("description") or "No description",
        )


TASK_COMPLETED = "completed"
TASK_NEEDS_ACTION = "needsAction"


@dataclass(frozen=True)
class TaskItem:
    id: str
    title: str
    notes: str = ""
    due: str = ""
    status: str = TASK_NEEDS_ACTION

    def summary_text(self) -> str:
        return f"{self.title}\n  {self.notes}\n  {self.due}"

    @property
    def completed(self) -> bool:
        return self.status == TASK_COMPLETED

    def to_payload(self) -> Dict[str, str]:
        payload = {"id": self.id, "title": self.title, "status": self.status}
        if self.notes:
            payload["notes"] = self.notes
        if self.due:
            payload["due"] = self.due
        return payload

    @classmethod
    def from_resource(cls, resource: Dict[str, Any]) -> "TaskItem":
        return cls(
            id=str(resource.get("id") or ""),
            title=str(resource.get("title") or ""),
            notes=str(resource.get("notes") or ""),
            due=str(resource.get("due") or ""),
            status=str(resource.get("status") or TASK_NEEDS_ACTION),
        )


@dataclass(frozen=True)
class VirtualMachineItem:
    name: str

    def summary_text(self) -> str:
        return self.name
