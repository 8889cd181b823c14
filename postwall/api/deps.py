"""
FastAPI dependencies: collaborator handles come from app.state (wired once in create_app),
never from module-level singletons.
"""
from typing import Iterator

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from postwall.identity.models import Identity
from postwall.identity.verifier import IdentityVerifier, VerificationPolicy
from postwall.paywall.entitlement import EntitlementChecker
from postwall.paywall.resolver import AccessResolver
from postwall.services.posts.service import PostService
from postwall.services.profiles.service import ProfileService
from postwall.storage.base import ContentStore, ProfileStore


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_identity_verifier(request: Request) -> IdentityVerifier:
    return request.app.state.identity_verifier


def require_identity(
    authorization: str | None = Header(default=None),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
) -> Identity:
    """Fail-closed: 401 unless a valid bearer token is presented."""
    return verifier.verify(authorization, VerificationPolicy.REQUIRED)


def optional_identity(
    authorization: str | None = Header(default=None),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
) -> Identity | None:
    """Fail-open: any verification failure yields an anonymous caller."""
    return verifier.verify(authorization, VerificationPolicy.OPTIONAL)


def get_profile_store(db: Session = Depends(get_db)) -> ProfileStore:
    return ProfileService(db)


def get_content_store(db: Session = Depends(get_db)) -> ContentStore:
    return PostService(db)


def get_access_resolver(
    posts: ContentStore = Depends(get_content_store),
    profiles: ProfileStore = Depends(get_profile_store),
) -> AccessResolver:
    return AccessResolver(posts, EntitlementChecker(profiles))
