"""Tool result envelopes and paging helpers."""

from .envelope import Envelope, envelope_text, fail, ok
from .pagination import page_info, paginate

__all__ = ["Envelope", "envelope_text", "fail", "ok", "page_info", "paginate"]
