"""Uniform tool results.

Every tool returns a single text part. Failures are encoded in that text as
``{"error": ...}`` rather than raised, so the calling agent always receives a
parseable result.
"""

import json
from typing import Any, Optional, Union

from mcp.types import TextContent

Envelope = list[TextContent]


def _render(payload: Any) -> str:
    if isinstance(payload, str):
        return payload
    return json.dumps(payload, indent=2, default=str)


def ok(payload: Any) -> Envelope:
    """Wrap a successful result.

    Strings (pre-formatted trees, reports) pass through verbatim; anything
    else is serialized as indented JSON.
    """
    return [TextContent(type="text", text=_render(payload))]


def fail(error: Union[str, BaseException], context: Optional[dict] = None) -> Envelope:
    """Wrap a failure as ``{"error": message, **context}``."""
    message = error if isinstance(error, str) else str(error)
    return ok({"error": message, **(context or {})})


def envelope_text(envelope: Envelope) -> str:
    """Return the text of a single-part envelope."""
    return envelope[0].text
