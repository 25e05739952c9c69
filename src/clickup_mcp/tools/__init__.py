"""The static tool catalog."""

from .catalog import ToolGroup, ToolInputError, ToolSpec
from .checklists import checklist_tools
from .documents import document_tools
from .goals import goal_tools
from .lists import list_tools
from .spaces import space_tools
from .tasks import task_tools
from .time_tracking import time_tracking_tools
from .workspace import workspace_tools

CORE_GROUPS = (
    workspace_tools,
    task_tools,
    list_tools,
    space_tools,
    goal_tools,
    checklist_tools,
    time_tracking_tools,
)


def tool_catalog(document_support: bool = False) -> list[ToolSpec]:
    """All tools this build can offer, in registration order.

    Document tools are only part of the catalog when document support is on.
    """
    groups = CORE_GROUPS + (document_tools,) if document_support else CORE_GROUPS
    return [spec for group in groups for spec in group.specs]


__all__ = ["ToolGroup", "ToolInputError", "ToolSpec", "tool_catalog"]
