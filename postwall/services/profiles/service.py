from datetime import datetime, timezone
from typing import Any

from sqlalchemy.orm import Session

from postwall.models.profile import ProfileRow
from postwall.services.store_errors import store_errors
from postwall.storage.base import Profile, ProfileStore, Subscription

# ProfileStore.update field names -> columns
FIELD_COLUMNS = {
    "email": "email",
    "username": "username",
    "subscription.active": "subscription_active",
    "subscription.updated_at": "subscription_updated_at",
}


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite drops tzinfo on the way back
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_record(row: ProfileRow) -> Profile:
    return Profile(
        uid=row.uid,
        email=row.email,
        username=row.username,
        subscription=Subscription(
            active=bool(row.subscription_active),
            updated_at=_as_utc(row.subscription_updated_at),
        ),
    )


class ProfileService(ProfileStore):
    def __init__(self, db: Session):
        self.db = db

    def get(self, uid: str) -> Profile | None:
        with store_errors("profiles.get"):
            row = self.db.query(ProfileRow).filter(ProfileRow.uid == uid).one_or_none()
        return _to_record(row) if row is not None else None

    def update(self, uid: str, fields: dict[str, Any]) -> None:
        unknown = set(fields) - set(FIELD_COLUMNS)
        if unknown:
            raise ValueError(f"Unknown profile fields: {sorted(unknown)}")
        values = {FIELD_COLUMNS[key]: value for key, value in fields.items()}
        with store_errors("profiles.update"):
            self.db.query(ProfileRow).filter(ProfileRow.uid == uid).update(values)
            self.db.commit()

    def create(
        self,
        uid: str,
        email: str | None = None,
        username: str | None = None,
        subscription_active: bool = False,
    ) -> Profile:
        """Provision a profile row (used by scripts/create_profile.py and tests)."""
        row = ProfileRow(
            uid=uid,
            email=email,
            username=username,
            subscription_active=subscription_active,
            subscription_updated_at=datetime.now(timezone.utc) if subscription_active else None,
        )
        with store_errors("profiles.create"):
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        return _to_record(row)
