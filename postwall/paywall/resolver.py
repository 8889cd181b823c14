"""
AccessResolver: composes content lookup, entitlement and preview shaping.

Listing is a teaser surface (always previews); single-post fetch is the
paywall boundary (full post for subscribers, PaywallBlockedError otherwise).
"""
from __future__ import annotations

from postwall.core.errors import NotFoundError, PaywallBlockedError
from postwall.identity.models import Identity
from postwall.paywall.access import decide_access
from postwall.paywall.audit import record_access
from postwall.paywall.entitlement import EntitlementChecker
from postwall.paywall.models import AccessContext
from postwall.paywall.preview import make_preview
from postwall.schemas.posts import PostOut, PostPreviewOut
from postwall.storage.base import ContentStore, Post


PAYWALL_MESSAGE = "Subscription required to read the full post"


def to_preview_view(post: Post) -> PostPreviewOut:
    shaped = make_preview(post.content)
    return PostPreviewOut(
        id=post.id,
        title=post.title,
        preview=shaped.preview,
        has_more=shaped.has_more,
        username=post.username,
        user_email=post.user_email,
        created_at=post.created_at,
    )


def to_full_view(post: Post) -> PostOut:
    return PostOut(
        id=post.id,
        title=post.title,
        content=post.content,
        user_email=post.user_email,
        username=post.username,
        created_at=post.created_at,
    )


class AccessResolver:
    def __init__(self, posts: ContentStore, entitlement: EntitlementChecker) -> None:
        self.posts = posts
        self.entitlement = entitlement

    def list_previews(self) -> list[PostPreviewOut]:
        """Every post as a preview, newest first, regardless of caller."""
        return [to_preview_view(post) for post in self.posts.list()]

    def resolve_post(self, post_id: str, identity: Identity | None) -> PostOut:
        """
        Full post for a verified subscriber.

        Raises:
            NotFoundError: unknown id (checked before any entitlement lookup).
            PaywallBlockedError: anonymous or non-subscriber caller; carries the preview.
        """
        post = self.posts.get(post_id)
        if post is None:
            raise NotFoundError("Post not found")

        uid = identity.uid if identity is not None else None
        ctx = AccessContext(uid=uid, is_subscriber=self.entitlement.is_subscriber(uid))
        decision = decide_access(ctx)
        record_access(post.id, uid, decision.state)

        if decision.show_full:
            return to_full_view(post)

        preview = to_preview_view(post)
        raise PaywallBlockedError(
            PAYWALL_MESSAGE,
            post=preview.model_dump(by_alias=True, mode="json"),
        )
