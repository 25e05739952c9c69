"""ClickUp MCP server with multi-workspace credential routing."""

__version__ = "0.3.0"
