"""List tools."""

from typing import Optional

from ..services import ClickUpServices
from .catalog import ToolGroup, require

list_tools = ToolGroup("lists")


def _list_summary(lst: dict) -> dict:
    return {
        "id": lst.get("id"),
        "name": lst.get("name"),
        "folder": (lst.get("folder") or {}).get("name"),
        "space": (lst.get("space") or {}).get("name"),
        "task_count": lst.get("task_count"),
    }


@list_tools.tool("get_list", action="getting list")
def get_list(services: ClickUpServices, list_id: str) -> dict:
    """Gets a list by ID, including its statuses."""
    require(list_id=list_id)
    return {"list": services.lists.get_list(list_id)}


@list_tools.tool("create_list", action="creating list")
def create_list(
    services: ClickUpServices,
    space_id: str,
    name: str,
    content: Optional[str] = None,
    due_date: Optional[int] = None,
) -> dict:
    """Creates a list directly in a space (outside any folder)."""
    require(space_id=space_id, name=name)
    lst = services.lists.create_list(space_id, {"name": name, "content": content, "due_date": due_date})
    return {
        "message": f'List "{lst.get("name")}" created successfully',
        "list": _list_summary(lst),
    }


@list_tools.tool("create_list_in_folder", action="creating list in folder")
def create_list_in_folder(
    services: ClickUpServices,
    folder_id: str,
    name: str,
    content: Optional[str] = None,
) -> dict:
    """Creates a list inside a folder."""
    require(folder_id=folder_id, name=name)
    lst = services.lists.create_list_in_folder(folder_id, {"name": name, "content": content})
    return {
        "message": f'List "{lst.get("name")}" created successfully',
        "list": _list_summary(lst),
    }


@list_tools.tool("update_list", action="updating list")
def update_list(
    services: ClickUpServices,
    list_id: str,
    name: Optional[str] = None,
    content: Optional[str] = None,
    due_date: Optional[int] = None,
) -> dict:
    """Renames a list or changes its description or due date."""
    require(list_id=list_id)
    lst = services.lists.update_list(list_id, {"name": name, "content": content, "due_date": due_date})
    return {
        "message": f'List "{lst.get("name")}" updated successfully',
        "list": _list_summary(lst),
    }


@list_tools.tool("delete_list", action="deleting list")
def delete_list(services: ClickUpServices, list_id: str) -> dict:
    """Permanently deletes a list and its tasks."""
    require(list_id=list_id)
    services.lists.delete_list(list_id)
    return {"message": f"List {list_id} deleted successfully"}
