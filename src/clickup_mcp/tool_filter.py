"""Tool visibility policy: which catalog tools the server exposes."""

from typing import Iterable, Optional


def parse_tool_list(value: Optional[str]) -> frozenset[str]:
    """Parse a comma-separated tool list, ignoring blanks."""
    if not value:
        return frozenset()
    return frozenset(name.strip() for name in value.split(",") if name.strip())


def effective_tool_set(
    catalog: Iterable[str],
    enabled: Iterable[str] = (),
    disabled: Iterable[str] = (),
) -> frozenset[str]:
    """Compute the tools to advertise.

    A non-empty ``enabled`` list fully decides visibility and ``disabled`` is
    ignored. Names that are not in the catalog are dropped silently.
    """
    catalog = frozenset(catalog)
    enabled = frozenset(enabled)
    if enabled:
        return catalog & enabled
    return catalog - frozenset(disabled)
