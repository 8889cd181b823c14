from fastapi import APIRouter, Body, Depends

from postwall.api.deps import (
    get_access_resolver,
    get_content_store,
    get_profile_store,
    optional_identity,
    require_identity,
)
from postwall.identity.models import Identity
from postwall.paywall.resolver import AccessResolver, to_full_view
from postwall.schemas.errors import ErrorOut
from postwall.schemas.posts import PaywallBlockedOut, PostCreateIn, PostOut, PostPreviewOut
from postwall.services.posts.publish import publish_post
from postwall.storage.base import ContentStore, ProfileStore


router = APIRouter(prefix="/posts", tags=["posts"])


@router.get(
    "",
    response_model=list[PostPreviewOut],
    dependencies=[Depends(optional_identity)],
)
def list_posts(
    resolver: AccessResolver = Depends(get_access_resolver),
) -> list[PostPreviewOut]:
    """Teaser surface: previews only, newest first, for every caller."""
    return resolver.list_previews()


@router.get(
    "/{post_id}",
    response_model=PostOut,
    responses={
        402: {"model": PaywallBlockedOut},
        404: {"model": ErrorOut},
    },
)
def get_post(
    post_id: str,
    identity: Identity | None = Depends(optional_identity),
    resolver: AccessResolver = Depends(get_access_resolver),
) -> PostOut:
    """Paywall boundary: full post for subscribers, 402 with a preview otherwise."""
    return resolver.resolve_post(post_id, identity)


@router.post(
    "",
    response_model=PostOut,
    responses={400: {"model": ErrorOut}, 401: {"model": ErrorOut}},
)
def create_post(
    body: PostCreateIn = Body(...),
    identity: Identity = Depends(require_identity),
    posts: ContentStore = Depends(get_content_store),
    profiles: ProfileStore = Depends(get_profile_store),
) -> PostOut:
    post = publish_post(posts, profiles, identity, body.title, body.content)
    return to_full_view(post)
