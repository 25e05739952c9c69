"""Space tools."""

from typing import Optional

from ..services import ClickUpServices
from .catalog import ToolGroup, require

space_tools = ToolGroup("spaces")


@space_tools.tool("get_spaces", action="getting spaces")
def get_spaces(services: ClickUpServices, archived: bool = False) -> dict:
    """Gets all spaces in the workspace with their feature configuration."""
    spaces = services.workspace.get_spaces(archived=archived)
    return {
        "spaces": [
            {
                "id": space.get("id"),
                "name": space.get("name"),
                "private": space.get("private"),
                "archived": space.get("archived"),
                "multiple_assignees": space.get("multiple_assignees"),
                "features": space.get("features"),
            }
            for space in spaces
        ],
        "total": len(spaces),
    }


@space_tools.tool("get_space", action="getting space")
def get_space(services: ClickUpServices, space_id: str) -> dict:
    """Gets a single space with its features and statuses."""
    require(space_id=space_id)
    return {"space": services.workspace.get_space(space_id)}


@space_tools.tool("create_space", action="creating space")
def create_space(
    services: ClickUpServices,
    name: str,
    multiple_assignees: bool = True,
    features: Optional[dict] = None,
) -> dict:
    """Creates a space.

    Args:
        name: Name of the space
        multiple_assignees: Allow multiple assignees on tasks
        features: Feature toggles, e.g. {"time_tracking": {"enabled": true}}
    """
    require(name=name)
    space = services.workspace.create_space({
        "name": name,
        "multiple_assignees": multiple_assignees,
        "features": features,
    })
    return {
        "message": f'Space "{space.get("name")}" created successfully',
        "space": {"id": space.get("id"), "name": space.get("name"), "private": space.get("private")},
    }


@space_tools.tool("update_space", action="updating space")
def update_space(
    services: ClickUpServices,
    space_id: str,
    name: Optional[str] = None,
    color: Optional[str] = None,
    private: Optional[bool] = None,
    admin_can_manage: Optional[bool] = None,
    multiple_assignees: Optional[bool] = None,
    features: Optional[dict] = None,
) -> dict:
    """Updates a space: rename, recolor, privacy and feature toggles."""
    require(space_id=space_id)
    space = services.workspace.update_space(space_id, {
        "name": name,
        "color": color,
        "private": private,
        "admin_can_manage": admin_can_manage,
        "multiple_assignees": multiple_assignees,
        "features": features,
    })
    return {
        "message": f'Space "{space.get("name")}" updated successfully',
        "space": {"id": space.get("id"), "name": space.get("name"), "private": space.get("private")},
    }


@space_tools.tool("delete_space", action="deleting space")
def delete_space(services: ClickUpServices, space_id: str) -> dict:
    """Permanently deletes a space and everything in it."""
    require(space_id=space_id)
    services.workspace.delete_space(space_id)
    return {"message": f"Space {space_id} deleted successfully"}
