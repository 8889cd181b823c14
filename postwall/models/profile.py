from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, String

from postwall.db.base import Base


class ProfileRow(Base):
    __tablename__ = "profiles"

    uid = Column(String, primary_key=True)  # identity provider uid
    email = Column(String, nullable=True, index=True)
    username = Column(String, nullable=True)
    subscription_active = Column(Boolean, nullable=False, default=False)
    subscription_updated_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
