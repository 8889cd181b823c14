"""
Access audit: record_access is called once per post detail resolution.
"""
from __future__ import annotations

import logging

from postwall.paywall.models import AccessState
from postwall.utils.metrics import paywall_access_total

logger = logging.getLogger(__name__)


def record_access(post_id: str, uid: str | None, state: AccessState) -> None:
    """Log and count the resolved access state for a post detail fetch."""
    paywall_access_total.labels(state=state.value).inc()
    logger.info(
        "paywall_access",
        extra={
            "post_id": post_id,
            "uid": uid,
            "access_state": state.value,
        },
    )
