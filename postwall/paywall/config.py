"""
Paywall config: typed wrapper over postwall.core.config for preview shaping.
"""
from __future__ import annotations

from postwall.core.config import settings


def get_preview_length() -> int:
    return settings.preview_length
