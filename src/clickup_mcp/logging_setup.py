"""Logging configuration.

stdout carries the stdio transport, so every log record goes to stderr.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "ERROR") -> None:
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger = logging.getLogger("clickup_mcp")
    logger.handlers = [handler]
    logger.setLevel(level)
    logger.propagate = False
