from __future__ import annotations

from pydantic import BaseModel


class Identity(BaseModel):
    """Verified caller; lives for one request and is never persisted."""

    uid: str
    email: str | None = None

    model_config = {"frozen": True}
