"""Workspace registry: one lazily built service bundle per configured workspace.

The registry is created once at the composition root and handed to whatever
needs it; it lives as long as the process. Bundles are never evicted or
rebuilt, so the number of bundles is bounded by the configured workspaces.
"""

import logging
import threading
from typing import Callable, Optional

from .config import TenantCredential, WorkspacesConfig
from .services import ClickUpServices, create_clickup_services

logger = logging.getLogger(__name__)

ServicesFactory = Callable[[TenantCredential], ClickUpServices]


class UnknownWorkspaceError(LookupError):
    """Raised when a call names a workspace that is not configured."""

    def __init__(self, message: str, key: str, available: list[str]):
        super().__init__(message)
        self.key = key
        self.available = list(available)


class WorkspaceRegistry:
    """Process-wide cache of ``workspace key -> ClickUpServices``.

    Construction for a key is serialized by a per-key lock, so concurrent
    first use of one workspace builds exactly one bundle while other
    workspaces proceed independently.
    """

    def __init__(
        self,
        config: WorkspacesConfig,
        factory: ServicesFactory = create_clickup_services,
    ):
        self._config = config
        self._factory = factory
        self._bundles: dict[str, ClickUpServices] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    @property
    def config(self) -> WorkspacesConfig:
        return self._config

    @property
    def default_key(self) -> str:
        return self._config.default

    def list_keys(self) -> list[str]:
        """All configured workspace keys, built or not."""
        return self._config.keys()

    def materialized_keys(self) -> list[str]:
        return [key for key in self.list_keys() if key in self._bundles]

    def credential(self, key: str) -> TenantCredential:
        """Return the credential for ``key``.

        Raises:
            UnknownWorkspaceError: If ``key`` is not configured.
        """
        credential = self._config.get(key)
        if credential is not None:
            return credential

        available = self.list_keys()
        if self._config.legacy:
            message = (
                f'Workspace "{key}" not found. Multiple workspaces not configured; '
                "only the default workspace is available. "
                "Set CLICKUP_WORKSPACES to enable multi-workspace support."
            )
        else:
            message = f'Workspace "{key}" not found.'
        raise UnknownWorkspaceError(message, key=key, available=available)

    def describe(self) -> list[dict]:
        """Summaries of every configured workspace, tokens excluded."""
        return [
            {
                "id": key,
                "team_id": credential.team_id,
                "description": credential.description,
                "is_default": key == self.default_key,
            }
            for key, credential in self._config.workspaces.items()
        ]

    def _lock_for(self, key: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock

    def resolve(self, workspace: Optional[str] = None) -> ClickUpServices:
        """Return the service bundle for ``workspace`` (default if omitted).

        Raises:
            UnknownWorkspaceError: If the workspace is not configured.
        """
        key = workspace or self.default_key

        bundle = self._bundles.get(key)
        if bundle is not None:
            return bundle

        credential = self.credential(key)

        with self._lock_for(key):
            # Double-check after acquiring lock
            bundle = self._bundles.get(key)
            if bundle is None:
                logger.info("Creating ClickUp services for workspace: %s", key)
                bundle = self._factory(credential)
                self._bundles[key] = bundle
                logger.info(
                    "Services ready for workspace %s (team %s)",
                    key,
                    credential.team_id,
                )
        return bundle
