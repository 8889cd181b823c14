"""
PreviewGenerator: deterministic truncation of post content.
Character-based (Python str indices), so a code point is never split.
"""
from __future__ import annotations

from postwall.paywall.config import get_preview_length
from postwall.paywall.models import Preview


def make_preview(content: str, length: int | None = None) -> Preview:
    """
    First `length` characters of content (default from config) and whether
    truncation actually removed anything.
    """
    limit = get_preview_length() if length is None else length
    if limit < 1:
        raise ValueError("preview length must be at least 1")
    preview = content[:limit]
    return Preview(preview=preview, has_more=len(content) > len(preview))
