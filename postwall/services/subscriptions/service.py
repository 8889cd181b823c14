"""
Entitlement toggle (dev/testing affordance): flips the caller's own subscription flag.

Read-modify-write without compare-and-swap: two concurrent toggles from the same
uid may lose an update. Ordering is left to the profile store.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone

from postwall.core.errors import NotFoundError
from postwall.storage.base import ProfileStore
from postwall.utils.metrics import subscription_toggles_total

logger = logging.getLogger(__name__)


def toggle_subscription(profiles: ProfileStore, uid: str) -> bool:
    """Negate subscription.active for uid and stamp updated_at; returns the new value."""
    profile = profiles.get(uid)
    if profile is None:
        raise NotFoundError("Profile not found")

    current = bool(profile.subscription and profile.subscription.active)
    new_active = not current
    profiles.update(
        uid,
        {
            "subscription.active": new_active,
            "subscription.updated_at": datetime.now(timezone.utc),
        },
    )
    subscription_toggles_total.labels(active=str(new_active).lower()).inc()
    logger.info("subscription_toggled", extra={"uid": uid, "active": new_active})
    return new_active
