"""Per-call workspace dispatch used by every workspace-scoped tool."""

from typing import Optional

from .registry import UnknownWorkspaceError, WorkspaceRegistry
from .services import ClickUpServices


def services_for_workspace(
    registry: WorkspaceRegistry,
    workspace: Optional[str],
) -> ClickUpServices:
    """Resolve the service bundle a tool call should use.

    Raises:
        UnknownWorkspaceError: With the configured workspace keys appended to
            the message so the caller can pick a valid one.
    """
    try:
        return registry.resolve(workspace)
    except UnknownWorkspaceError as e:
        available = registry.list_keys()
        raise type(e)(
            f"{e}\nAvailable workspaces: {', '.join(available)}",
            key=e.key,
            available=available,
        ) from e
