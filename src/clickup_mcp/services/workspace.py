"""Spaces, folders and the workspace hierarchy."""

from typing import Optional

from .base import ClickUpService


class WorkspaceService(ClickUpService):

    def get_workspace_name(self) -> str:
        """Name of the team this client is bound to, falling back to its ID."""
        teams = self.client.get("/team").get("teams", [])
        for team in teams:
            if str(team.get("id")) == str(self.team_id):
                return team.get("name") or str(self.team_id)
        return str(self.team_id)

    def get_spaces(self, archived: bool = False) -> list[dict]:
        self._log_operation("get_spaces", archived=archived)
        result = self.client.get(f"/team/{self.team_id}/space", params={"archived": archived})
        return result.get("spaces", [])

    def get_space(self, space_id: str) -> dict:
        self._log_operation("get_space", space_id=space_id)
        return self.client.get(f"/space/{space_id}")

    def create_space(self, data: dict) -> dict:
        self._log_operation("create_space", name=data.get("name"))
        space = self.client.post(f"/team/{self.team_id}/space", data)
        self.logger.info("Created space %s (%s)", space.get("name"), space.get("id"))
        return space

    def update_space(self, space_id: str, data: dict) -> dict:
        self._log_operation("update_space", space_id=space_id)
        return self.client.put(f"/space/{space_id}", data)

    def delete_space(self, space_id: str) -> None:
        self._log_operation("delete_space", space_id=space_id)
        self.client.delete(f"/space/{space_id}")

    def get_folders(self, space_id: str) -> list[dict]:
        return self.client.get(f"/space/{space_id}/folder").get("folders", [])

    def get_folderless_lists(self, space_id: str) -> list[dict]:
        return self.client.get(f"/space/{space_id}/list").get("lists", [])

    def get_hierarchy(self) -> dict:
        """Build the space -> folder -> list tree for the workspace.

        Returns:
            ``{"root": {"id", "name", "children": [...]}}`` where every child
            node carries ``id``, ``name``, ``type`` and ``children``.
        """
        spaces = []
        for space in self.get_spaces():
            children = []
            for folder in self.get_folders(space["id"]):
                children.append(_node(folder, "folder", [
                    _node(lst, "list") for lst in folder.get("lists", [])
                ]))
            children.extend(_node(lst, "list") for lst in self.get_folderless_lists(space["id"]))
            spaces.append(_node(space, "space", children))

        return {
            "root": {
                "id": str(self.team_id),
                "name": self.get_workspace_name(),
                "children": spaces,
            }
        }


def _node(item: dict, node_type: str, children: Optional[list[dict]] = None) -> dict:
    return {
        "id": item["id"],
        "name": item.get("name", ""),
        "type": node_type,
        "children": children or [],
    }
