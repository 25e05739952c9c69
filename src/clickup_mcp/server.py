"""MCP server for ClickUp with multi-workspace support.

Every workspace-scoped tool accepts an optional ``workspace`` argument that
selects which configured ClickUp account the call runs against.
"""

import inspect
import logging
from typing import Callable, Optional

from mcp.server.fastmcp import FastMCP

from .clickup_client import ClickUpAPIError
from .config import ServerSettings, load_settings
from .dispatch import services_for_workspace
from .logging_setup import configure_logging
from .output import Envelope, fail, ok
from .registry import UnknownWorkspaceError, WorkspaceRegistry
from .tool_filter import effective_tool_set
from .tools import ToolInputError, ToolSpec, tool_catalog
from .tools.catalog import REGISTRY_PARAM, SERVICES_PARAM

logger = logging.getLogger(__name__)

WORKSPACE_PARAM = "workspace"

INSTRUCTIONS = """ClickUp MCP - tasks, lists, spaces, goals, checklists, docs and time tracking.

## Workspaces
This server may be connected to several ClickUp workspaces.
- `get_available_workspaces` lists them and shows the default.
- Every other tool takes an optional `workspace` argument; omit it to use the default.
- IDs are only valid inside the workspace they came from. Pass the same
  `workspace` to follow-up calls.

## Navigation
Use `get_workspace_hierarchy` to find space, folder and list IDs before
creating or reading tasks. Never guess IDs.

## Errors
Failures come back as `{"error": "..."}`. If a workspace is unknown the
message lists the valid ones."""

_RECOVERABLE_ERRORS = (ToolInputError, UnknownWorkspaceError, ClickUpAPIError)


def _workspace_parameter() -> inspect.Parameter:
    return inspect.Parameter(
        WORKSPACE_PARAM,
        inspect.Parameter.KEYWORD_ONLY,
        default=None,
        annotation=Optional[str],
    )


def bind_tool(spec: ToolSpec, registry: WorkspaceRegistry) -> Callable[..., Envelope]:
    """Turn a handler into the callable the MCP server registers.

    The injected ``services``/``registry`` parameters are removed from the
    public signature. Workspace-scoped tools gain an optional ``workspace``
    parameter that is resolved through the registry on every call. The
    result is always an envelope, never a raised exception.
    """
    handler = spec.handler
    handler_params = inspect.signature(handler).parameters
    scoped = spec.workspace_scoped
    wants_registry = REGISTRY_PARAM in handler_params

    params = [
        p.replace(kind=inspect.Parameter.KEYWORD_ONLY)
        for name, p in handler_params.items()
        if name not in (SERVICES_PARAM, REGISTRY_PARAM)
    ]
    if scoped:
        params.append(_workspace_parameter())

    def call(**kwargs) -> Envelope:
        workspace = kwargs.pop(WORKSPACE_PARAM, None) if scoped else None
        try:
            if scoped:
                kwargs[SERVICES_PARAM] = services_for_workspace(registry, workspace)
            if wants_registry:
                kwargs[REGISTRY_PARAM] = registry
            return ok(handler(**kwargs))
        except _RECOVERABLE_ERRORS as e:
            logger.info("Tool %s failed: %s", spec.name, e)
            return fail(f"Error {spec.action}: {e}")
        except Exception as e:
            logger.exception("Unexpected error in tool %s", spec.name)
            return fail(f"Error {spec.action}: {e}")

    call.__name__ = spec.name
    call.__qualname__ = spec.name
    call.__doc__ = spec.description
    call.__signature__ = inspect.Signature(params)
    call.__annotations__ = {
        p.name: p.annotation for p in params if p.annotation is not inspect.Parameter.empty
    }
    return call


def enabled_tools(settings: ServerSettings) -> list[ToolSpec]:
    """Catalog tools that survive the enabled/disabled policy, in catalog order."""
    catalog = tool_catalog(settings.document_support)
    names = [spec.name for spec in catalog]

    unknown = settings.enabled_tools - set(names)
    if unknown:
        logger.debug("Ignoring unknown tools in ENABLED_TOOLS: %s", ", ".join(sorted(unknown)))

    visible = effective_tool_set(names, settings.enabled_tools, settings.disabled_tools)
    return [spec for spec in catalog if spec.name in visible]


def build_server(
    settings: ServerSettings,
    registry: Optional[WorkspaceRegistry] = None,
) -> FastMCP:
    """Compose the MCP server.

    The registry is created here unless one is injected; it is the single
    owner of the per-workspace service bundles for the server's lifetime.
    """
    if registry is None:
        registry = WorkspaceRegistry(settings.workspaces)

    server = FastMCP(
        "clickup-mcp",
        instructions=INSTRUCTIONS,
        host=settings.host,
        port=settings.port,
    )

    specs = enabled_tools(settings)
    for spec in specs:
        server.add_tool(
            bind_tool(spec, registry),
            name=spec.name,
            description=spec.description,
            structured_output=False,
        )

    logger.info(
        "Registered %d tools for workspaces: %s (default: %s)",
        len(specs),
        ", ".join(registry.list_keys()),
        registry.default_key,
    )
    return server


def main():
    """Run the MCP server using environment configuration."""
    settings = load_settings()
    configure_logging(settings.log_level)
    build_server(settings).run(transport=settings.transport)


if __name__ == "__main__":
    main()
