"""Client-side paging for ClickUp endpoints that return a whole collection."""

from typing import Any, Sequence


def page_info(total: int, limit: int, offset: int, returned: int) -> dict:
    """Describe one page of ``total`` items and where the next one starts."""
    end = offset + returned
    remaining = end < total
    return {
        "total": total,
        "offset": offset,
        "limit": limit,
        "returned": returned,
        "has_more": remaining,
        "next_offset": end if remaining else None,
    }


def paginate(items: Sequence[Any], limit: int, offset: int) -> tuple[list[Any], dict]:
    offset = max(offset, 0)
    window = list(items[offset:offset + max(limit, 0)])
    return window, page_info(len(items), limit, offset, len(window))
