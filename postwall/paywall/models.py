"""
Paywall DTOs: AccessContext (input of decide_access), AccessDecision, Preview.
"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class AccessState(str, Enum):
    ANONYMOUS = "anonymous"
    AUTHENTICATED_NON_SUBSCRIBER = "authenticated_non_subscriber"
    AUTHENTICATED_SUBSCRIBER = "authenticated_subscriber"


# ----- Input of decide_access -----


class AccessContext(BaseModel):
    """Everything decide_access needs: whether a caller was verified and their entitlement."""

    uid: str | None = None
    is_subscriber: bool = False

    model_config = {"frozen": True}

    @property
    def has_identity(self) -> bool:
        return self.uid is not None


# ----- Decision (pure logic, no I/O) -----


class AccessDecision(BaseModel):
    state: AccessState
    show_full: bool = Field(
        ...,
        description="True = emit the full post; False = paywall envelope with preview",
    )

    model_config = {"frozen": True}


# ----- Result of make_preview -----


class Preview(BaseModel):
    preview: str
    has_more: bool

    model_config = {"frozen": True}
