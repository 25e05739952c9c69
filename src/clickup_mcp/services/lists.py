"""Lists, either directly in a space or inside a folder."""

from .base import ClickUpService


class ListService(ClickUpService):

    def get_list(self, list_id: str) -> dict:
        self._log_operation("get_list", list_id=list_id)
        return self.client.get(f"/list/{list_id}")

    def create_list(self, space_id: str, data: dict) -> dict:
        self._log_operation("create_list", space_id=space_id, name=data.get("name"))
        return self.client.post(f"/space/{space_id}/list", data)

    def create_list_in_folder(self, folder_id: str, data: dict) -> dict:
        self._log_operation("create_list_in_folder", folder_id=folder_id, name=data.get("name"))
        return self.client.post(f"/folder/{folder_id}/list", data)

    def update_list(self, list_id: str, data: dict) -> dict:
        self._log_operation("update_list", list_id=list_id)
        return self.client.put(f"/list/{list_id}", data)

    def delete_list(self, list_id: str) -> None:
        self._log_operation("delete_list", list_id=list_id)
        self.client.delete(f"/list/{list_id}")
