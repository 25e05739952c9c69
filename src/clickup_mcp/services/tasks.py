"""Tasks, task dependencies and task links."""

from typing import Optional

from ..clickup_client import ClickUpAPIError
from .base import ClickUpService


class TaskService(ClickUpService):

    def get_task(self, task_id: str, include_subtasks: bool = False) -> dict:
        self._log_operation("get_task", task_id=task_id)
        return self.client.get(f"/task/{task_id}", params={"include_subtasks": include_subtasks})

    def get_tasks(
        self,
        list_id: str,
        page: int = 0,
        include_closed: bool = False,
        statuses: Optional[list[str]] = None,
    ) -> list[dict]:
        self._log_operation("get_tasks", list_id=list_id, page=page)
        result = self.client.get(
            f"/list/{list_id}/task",
            params={"page": page, "include_closed": include_closed, "statuses": statuses},
        )
        return result.get("tasks", [])

    def create_task(self, list_id: str, data: dict) -> dict:
        self._log_operation("create_task", list_id=list_id, name=data.get("name"))
        task = self.client.post(f"/list/{list_id}/task", data)
        self.logger.info("Created task %s (%s)", task.get("name"), task.get("id"))
        return task

    def update_task(self, task_id: str, data: dict) -> dict:
        self._log_operation("update_task", task_id=task_id)
        return self.client.put(f"/task/{task_id}", data)

    def delete_task(self, task_id: str) -> None:
        self._log_operation("delete_task", task_id=task_id)
        self.client.delete(f"/task/{task_id}")

    def add_dependency(
        self,
        task_id: str,
        depends_on: Optional[str] = None,
        dependency_of: Optional[str] = None,
    ) -> dict:
        if not depends_on and not dependency_of:
            raise ClickUpAPIError("Either depends_on or dependency_of is required")
        self._log_operation("add_dependency", task_id=task_id, depends_on=depends_on, dependency_of=dependency_of)
        return self.client.post(
            f"/task/{task_id}/dependency",
            {"depends_on": depends_on, "dependency_of": dependency_of},
        )

    def delete_dependency(
        self,
        task_id: str,
        depends_on: Optional[str] = None,
        dependency_of: Optional[str] = None,
    ) -> None:
        if not depends_on and not dependency_of:
            raise ClickUpAPIError("Either depends_on or dependency_of is required")
        self._log_operation("delete_dependency", task_id=task_id, depends_on=depends_on, dependency_of=dependency_of)
        self.client.delete(
            f"/task/{task_id}/dependency",
            params={"depends_on": depends_on, "dependency_of": dependency_of},
        )

    def add_task_link(self, task_id: str, links_to: str) -> dict:
        self._log_operation("add_task_link", task_id=task_id, links_to=links_to)
        return self.client.post(f"/task/{task_id}/link/{links_to}")

    def delete_task_link(self, task_id: str, links_to: str) -> None:
        self._log_operation("delete_task_link", task_id=task_id, links_to=links_to)
        self.client.delete(f"/task/{task_id}/link/{links_to}")
