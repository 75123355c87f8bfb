import logging
from typing import Any, Dict, List, Optional

from application.ports import TaskService
from core.items import TaskItem

from .rest_client import GoogleClientError, GoogleRestClient

logger = logging.getLogger("dashdeck.google")

TASKS_URL = "https://tasks.googleapis.com/tasks/v1/lists/@default/tasks"


class GoogleTasksService(TaskService):
    def __init__(self, client: GoogleRestClient, base_url: str = TASKS_URL) -> None:
        self.client = client
        self.base_url = base_url

    def list_tasks(self) -> List[TaskItem]:
        try:
            payload = self.client.get_json(self.base_url, params={"showCompleted": "false"})
        except GoogleClientError as exc:
            logger.warning("Tasks read failed: %s", exc)
            return []
        items = payload.get("items")
        if not isinstance(items, list):
            return []
        tasks = [TaskItem.from_resource(item) for item in items if isinstance(item, dict)]
        return [task for task in tasks if not task.completed]

    def create_task(self, title: str, notes: str, due: str) -> bool:
        body: Dict[str, Any] = {"title": title, "notes": notes}
        if due.strip():
            body["due"] = f"{due}.000Z"
        return self._write("post", self.base_url, body)

    def update_task(self, task: TaskItem) -> bool:
        return self._write("put", f"{self.base_url}/{task.id}", task.to_payload())

    def delete_task(self, task_id: str) -> bool:
        return self._write("delete", f"{self.base_url}/{task_id}", None)

    def _write(self, method: str, url: str, body: Optional[Dict[str, Any]]) -> bool:
        try:
            self.client.request(method, url, payload=body)
        except GoogleClientError as exc:
            logger.warning("Tasks %s failed: %s", method.upper(), exc)
            return False
        return True
