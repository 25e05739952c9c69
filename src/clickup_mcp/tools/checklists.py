"""Checklist tools."""

from typing import Optional

from ..services import ClickUpServices
from .catalog import ToolGroup, ToolInputError, require

checklist_tools = ToolGroup("checklists")


def _checklist_summary(checklist: dict) -> dict:
    return {
        "id": checklist.get("id"),
        "task_id": checklist.get("task_id"),
        "name": checklist.get("name"),
        "resolved": checklist.get("resolved"),
        "unresolved": checklist.get("unresolved"),
        "items": [
            {"id": item.get("id"), "name": item.get("name"), "resolved": item.get("resolved")}
            for item in checklist.get("items", [])
        ],
    }


@checklist_tools.tool("create_checklist", action="creating checklist")
def create_checklist(services: ClickUpServices, task_id: str, name: str) -> dict:
    """Adds a new checklist to a task."""
    require(task_id=task_id, name=name)
    checklist = services.checklists.create_checklist(task_id, name)
    return {
        "message": f'Checklist "{checklist.get("name")}" created successfully',
        "checklist": _checklist_summary(checklist),
    }


@checklist_tools.tool("edit_checklist", action="editing checklist")
def edit_checklist(
    services: ClickUpServices,
    checklist_id: str,
    name: Optional[str] = None,
    position: Optional[int] = None,
) -> dict:
    """Renames a checklist or moves it to a new position on its task."""
    require(checklist_id=checklist_id)
    if name is None and position is None:
        raise ToolInputError("Either name or position is required")
    checklist = services.checklists.edit_checklist(checklist_id, {"name": name, "position": position})
    return {
        "message": f'Checklist "{checklist.get("name")}" updated successfully',
        "checklist": _checklist_summary(checklist),
    }


@checklist_tools.tool("delete_checklist", action="deleting checklist")
def delete_checklist(services: ClickUpServices, checklist_id: str) -> dict:
    """Deletes a checklist and all of its items."""
    require(checklist_id=checklist_id)
    services.checklists.delete_checklist(checklist_id)
    return {"message": f"Checklist {checklist_id} deleted successfully"}


@checklist_tools.tool("create_checklist_item", action="creating checklist item")
def create_checklist_item(
    services: ClickUpServices,
    checklist_id: str,
    name: str,
    assignee: Optional[int] = None,
) -> dict:
    """Adds an item to a checklist, optionally assigned to a user ID."""
    require(checklist_id=checklist_id, name=name)
    checklist = services.checklists.create_checklist_item(checklist_id, {"name": name, "assignee": assignee})
    return {
        "message": f'Checklist item "{name}" created successfully',
        "checklist": _checklist_summary(checklist),
    }


@checklist_tools.tool("edit_checklist_item", action="editing checklist item")
def edit_checklist_item(
    services: ClickUpServices,
    checklist_id: str,
    checklist_item_id: str,
    name: Optional[str] = None,
    assignee: Optional[int] = None,
    resolved: Optional[bool] = None,
    parent: Optional[str] = None,
) -> dict:
    """Renames, assigns, resolves or nests a checklist item.

    Set `parent` to another item's ID to nest this item under it.
    """
    require(checklist_id=checklist_id, checklist_item_id=checklist_item_id)
    checklist = services.checklists.edit_checklist_item(checklist_id, checklist_item_id, {
        "name": name,
        "assignee": assignee,
        "resolved": resolved,
        "parent": parent,
    })
    return {
        "message": f"Checklist item {checklist_item_id} updated successfully",
        "checklist": _checklist_summary(checklist),
    }


@checklist_tools.tool("delete_checklist_item", action="deleting checklist item")
def delete_checklist_item(services: ClickUpServices, checklist_id: str, checklist_item_id: str) -> dict:
    """Deletes a single checklist item."""
    require(checklist_id=checklist_id, checklist_item_id=checklist_item_id)
    services.checklists.delete_checklist_item(checklist_id, checklist_item_id)
    return {"message": f"Checklist item {checklist_item_id} deleted successfully"}
