"""
EntitlementChecker: uid -> subscriber flag via the profile store.
Store failures propagate (StoreError -> 500); they are never downgraded to False.
"""
from __future__ import annotations

from postwall.storage.base import ProfileStore


class EntitlementChecker:
    def __init__(self, profiles: ProfileStore) -> None:
        self.profiles = profiles

    def is_subscriber(self, uid: str | None) -> bool:
        if not uid:
            return False
        profile = self.profiles.get(uid)
        if profile is None or profile.subscription is None:
            return False
        return bool(profile.subscription.active)
