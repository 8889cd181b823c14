"""
Post creation: validates the body and stamps author fields from the caller's profile.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone

from postwall.core.errors import BadRequestError
from postwall.identity.models import Identity
from postwall.storage.base import ContentStore, NewPost, Post, ProfileStore
from postwall.utils.metrics import posts_created_total

logger = logging.getLogger(__name__)

DEFAULT_USERNAME = "Anonymous"


def publish_post(
    posts: ContentStore,
    profiles: ProfileStore,
    identity: Identity,
    title: str | None,
    content: str | None,
) -> Post:
    """
    Store a new post authored by the verified caller.
    Empty or missing title/content -> BadRequestError, nothing is written.
    """
    if not title or not content:
        raise BadRequestError("Missing title or content")

    profile = profiles.get(identity.uid)
    username = (profile.username if profile else None) or DEFAULT_USERNAME
    user_email = (profile.email if profile else None) or identity.email

    new_post = NewPost(
        title=title,
        content=content,
        user_email=user_email,
        username=username,
        created_at=datetime.now(timezone.utc),
    )
    post_id = posts.add(new_post)
    posts_created_total.inc()
    logger.info("post_created", extra={"post_id": post_id, "uid": identity.uid})
    return Post(id=post_id, **new_post.model_dump())
