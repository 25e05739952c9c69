"""Workspace-scoped service bundle shared by every tool handler."""

from dataclasses import dataclass

from ..clickup_client import ClickUpClient
from ..config import TenantCredential
from .checklists import ChecklistService
from .documents import DocumentService
from .goals import GoalService
from .lists import ListService
from .tasks import TaskService
from .time_tracking import TimeTrackingService
from .workspace import WorkspaceService


@dataclass(frozen=True)
class ClickUpServices:
    """All feature services for one workspace, sharing one client."""

    client: ClickUpClient
    workspace: WorkspaceService
    tasks: TaskService
    lists: ListService
    goals: GoalService
    checklists: ChecklistService
    documents: DocumentService
    time_tracking: TimeTrackingService

    @property
    def team_id(self) -> str:
        return self.client.team_id


def create_clickup_services(credential: TenantCredential) -> ClickUpServices:
    """Default bundle factory: one client, one instance of every service."""
    client = ClickUpClient(token=credential.token, team_id=credential.team_id)
    return ClickUpServices(
        client=client,
        workspace=WorkspaceService(client),
        tasks=TaskService(client),
        lists=ListService(client),
        goals=GoalService(client),
        checklists=ChecklistService(client),
        documents=DocumentService(client),
        time_tracking=TimeTrackingService(client),
    )


__all__ = [
    "ClickUpServices",
    "create_clickup_services",
    "ChecklistService",
    "DocumentService",
    "GoalService",
    "ListService",
    "TaskService",
    "TimeTrackingService",
    "WorkspaceService",
]
