"""Time entries and running timers."""

from typing import Optional

from .base import ClickUpService


class TimeTrackingService(ClickUpService):

    def _path(self, suffix: str = "") -> str:
        return f"/team/{self.team_id}/time_entries{suffix}"

    def get_time_entries(
        self,
        start_date: Optional[int] = None,
        end_date: Optional[int] = None,
        assignee: Optional[str] = None,
        task_id: Optional[str] = None,
    ) -> list[dict]:
        self._log_operation("get_time_entries", start_date=start_date, end_date=end_date)
        result = self.client.get(
            self._path(),
            params={
                "start_date": start_date,
                "end_date": end_date,
                "assignee": assignee,
                "task_id": task_id,
            },
        )
        return result.get("data", [])

    def get_current_time_entry(self) -> Optional[dict]:
        self._log_operation("get_current_time_entry")
        return self.client.get(self._path("/current")).get("data")

    def start_time_entry(self, task_id: str, description: Optional[str] = None, billable: bool = False) -> dict:
        self._log_operation("start_time_entry", task_id=task_id)
        result = self.client.post(
            self._path("/start"),
            {"tid": task_id, "description": description, "billable": billable},
        )
        return result.get("data", result)

    def stop_time_entry(self) -> dict:
        self._log_operation("stop_time_entry")
        result = self.client.post(self._path("/stop"))
        return result.get("data", result)

    def create_time_entry(self, data: dict) -> dict:
        self._log_operation("create_time_entry", task_id=data.get("tid"))
        result = self.client.post(self._path(), data)
        return result.get("data", result)

    def delete_time_entry(self, timer_id: str) -> None:
        self._log_operation("delete_time_entry", timer_id=timer_id)
        self.client.delete(self._path(f"/{timer_id}"))
