"""Task checklists and checklist items."""

from .base import ClickUpService


class ChecklistService(ClickUpService):
    """Every write returns the full, updated checklist."""

    def create_checklist(self, task_id: str, name: str) -> dict:
        self._log_operation("create_checklist", task_id=task_id, name=name)
        return self.client.post(f"/task/{task_id}/checklist", {"name": name})["checklist"]

    def edit_checklist(self, checklist_id: str, data: dict) -> dict:
        self._log_operation("edit_checklist", checklist_id=checklist_id)
        return self.client.put(f"/checklist/{checklist_id}", data)["checklist"]

    def delete_checklist(self, checklist_id: str) -> None:
        self._log_operation("delete_checklist", checklist_id=checklist_id)
        self.client.delete(f"/checklist/{checklist_id}")

    def create_checklist_item(self, checklist_id: str, data: dict) -> dict:
        self._log_operation("create_checklist_item", checklist_id=checklist_id)
        return self.client.post(f"/checklist/{checklist_id}/checklist_item", data)["checklist"]

    def edit_checklist_item(self, checklist_id: str, item_id: str, data: dict) -> dict:
        self._log_operation("edit_checklist_item", checklist_id=checklist_id, item_id=item_id)
        return self.client.put(
            f"/checklist/{checklist_id}/checklist_item/{item_id}", data
        )["checklist"]

    def delete_checklist_item(self, checklist_id: str, item_id: str) -> None:
        self._log_operation("delete_checklist_item", checklist_id=checklist_id, item_id=item_id)
        self.client.delete(f"/checklist/{checklist_id}/checklist_item/{item_id}")
