"""Base class shared by the workspace-scoped ClickUp services."""

import logging

from ..clickup_client import ClickUpClient


class ClickUpService:
    """A feature service bound to one workspace's client."""

    def __init__(self, client: ClickUpClient):
        self.client = client
        self.logger = logging.getLogger(f"{__package__}.{type(self).__name__}")

    @property
    def team_id(self) -> str:
        return self.client.team_id

    def _log_operation(self, operation: str, **details) -> None:
        self.logger.debug("%s %s", operation, details)
