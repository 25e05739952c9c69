"""Workspace-level tools: hierarchy and workspace discovery."""

from ..registry import WorkspaceRegistry
from ..services import ClickUpServices
from .catalog import ToolGroup

workspace_tools = ToolGroup("workspace")


def format_tree(hierarchy: dict) -> str:
    """Render a hierarchy as an indented tree with typed IDs.

    Example:
        Acme (Workspace ID: 9001)
        ├── Engineering (Space ID: 1)
        │   └── Backlog (List ID: 10)
        └── Ops (Space ID: 2)
    """
    root = hierarchy["root"]
    lines = [f"{root['name']} (Workspace ID: {root['id']})"]

    def walk(children: list[dict], prefix: str) -> None:
        for index, node in enumerate(children):
            last = index == len(children) - 1
            id_type = f"{node['type'].capitalize()} ID"
            lines.append(f"{prefix}{'└── ' if last else '├── '}{node['name']} ({id_type}: {node['id']})")
            walk(node.get("children", []), prefix + ("    " if last else "│   "))

    walk(root.get("children", []), "")
    return "\n".join(lines)


@workspace_tools.tool("get_workspace_hierarchy", action="getting workspace hierarchy")
def get_workspace_hierarchy(services: ClickUpServices) -> str:
    """Gets the complete workspace hierarchy (spaces, folders, lists).

    Returns a tree with names and IDs for navigation.
    """
    return format_tree(services.workspace.get_hierarchy())


@workspace_tools.tool("get_available_workspaces", action="getting available workspaces")
def get_available_workspaces(registry: WorkspaceRegistry) -> dict:
    """Lists every workspace configured on this server.

    Returns workspace identifiers, the default workspace and descriptions.
    Pass one of these identifiers as `workspace` to any other tool.
    """
    workspaces = registry.describe()
    return {
        "default": registry.default_key,
        "workspaces": workspaces,
        "count": len(workspaces),
    }
