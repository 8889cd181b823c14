from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PostCreateIn(BaseModel):
    # Optional on purpose: missing and empty values are both reported as 400 by the route
    title: str | None = None
    content: str | None = None


class PostOut(CamelModel):
    """Full post, emitted only to subscribers and on creation."""

    id: str
    title: str
    content: str
    user_email: str | None = None
    username: str
    created_at: datetime


class PostPreviewOut(CamelModel):
    id: str
    title: str
    preview: str
    has_more: bool
    username: str
    user_email: str | None = None
    created_at: datetime


class PaywallBlockedOut(BaseModel):
    error: str
    code: str = "PAYWALL_BLOCKED"
    post: PostPreviewOut
