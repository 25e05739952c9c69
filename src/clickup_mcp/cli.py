"""Command line interface for the ClickUp MCP server."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .config import ConfigError, ServerSettings, TRANSPORTS, load_settings, parse_overrides
from .logging_setup import configure_logging
from .registry import WorkspaceRegistry
from .server import build_server, enabled_tools

app = typer.Typer(
    name="clickup-mcp",
    help="ClickUp MCP server with multi-workspace support",
    no_args_is_help=True,
)
# stdout belongs to the stdio transport when serving
console = Console(stderr=True)
out = Console()

ENV_OPTION_HELP = "Configuration override as KEY=VALUE (repeatable), e.g. --env CLICKUP_TEAM_ID=123"


def _load(env: Optional[list[str]], workspaces_file: Optional[Path]) -> ServerSettings:
    """Load settings or exit with a readable error."""
    try:
        return load_settings(
            overrides=parse_overrides(env),
            workspaces_file=workspaces_file,
        )
    except ConfigError as e:
        console.print(f"[red]Configuration Error:[/red] {e}")
        raise typer.Exit(1)


@app.command("serve")
def serve(
    env: Optional[list[str]] = typer.Option(None, "--env", "-e", help=ENV_OPTION_HELP),
    workspaces_file: Optional[Path] = typer.Option(
        None, "--workspaces-file", "-w", help="YAML/JSON file with the multi-workspace configuration"
    ),
    transport: Optional[str] = typer.Option(
        None, "--transport", "-t", help=f"Transport ({'|'.join(TRANSPORTS)}); default from ENABLE_SSE"
    ),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port for sse/streamable-http"),
):
    """Run the MCP server."""
    settings = _load(env, workspaces_file)
    if transport and transport not in TRANSPORTS:
        console.print(f"[red]Error:[/red] Unknown transport {transport!r}. Use one of: {', '.join(TRANSPORTS)}")
        raise typer.Exit(1)

    configure_logging(settings.log_level)
    server = build_server(settings)
    if port is not None:
        server.settings.port = port
    server.run(transport=transport or settings.transport)


@app.command("workspaces")
def list_workspaces(
    env: Optional[list[str]] = typer.Option(None, "--env", "-e", help=ENV_OPTION_HELP),
    workspaces_file: Optional[Path] = typer.Option(None, "--workspaces-file", "-w", help="Workspaces file"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
):
    """Show configured workspaces (tokens are never printed)."""
    settings = _load(env, workspaces_file)
    registry = WorkspaceRegistry(settings.workspaces)
    workspaces = registry.describe()

    if as_json:
        out.print_json(json.dumps({"default": registry.default_key, "workspaces": workspaces}))
        return

    mode = "legacy single-workspace" if settings.workspaces.legacy else "multi-workspace"
    table = Table(title=f"ClickUp workspaces ({mode})")
    table.add_column("Workspace", style="cyan")
    table.add_column("Team ID")
    table.add_column("Description")
    table.add_column("Default", justify="center")
    for ws in workspaces:
        table.add_row(ws["id"], ws["team_id"], ws["description"] or "", "✓" if ws["is_default"] else "")
    out.print(table)


@app.command("tools")
def list_tools(
    env: Optional[list[str]] = typer.Option(None, "--env", "-e", help=ENV_OPTION_HELP),
    workspaces_file: Optional[Path] = typer.Option(None, "--workspaces-file", "-w", help="Workspaces file"),
):
    """Show the tools the server would expose after ENABLED_TOOLS/DISABLED_TOOLS."""
    settings = _load(env, workspaces_file)
    specs = enabled_tools(settings)

    table = Table(title=f"Enabled tools ({len(specs)})")
    table.add_column("Tool", style="cyan")
    table.add_column("Group")
    table.add_column("Workspace-scoped", justify="center")
    for spec in specs:
        table.add_row(spec.name, spec.group, "✓" if spec.workspace_scoped else "")
    out.print(table)


if __name__ == "__main__":
    app()
