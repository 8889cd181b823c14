"""
Shared fixtures: fake identity provider, in-memory stores, SQLite-backed app.
Environment defaults must be set before postwall.core.config is imported.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("IDENTITY_PROJECT_ID", "test-project")

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from postwall.core.errors import IdentityProviderUnavailableError, TokenVerificationError
from postwall.identity.models import Identity
from postwall.identity.provider import IdentityProvider
from postwall.storage.base import ContentStore, NewPost, Post, Profile, ProfileStore, Subscription

ALICE = Identity(uid="alice", email="alice@example.com")  # subscriber
BOB = Identity(uid="bob", email="bob@example.com")  # profile, not subscribed
CAROL = Identity(uid="carol", email="carol@example.com")  # no profile

TOKENS = {"alice-token": ALICE, "bob-token": BOB, "carol-token": CAROL}


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class FakeIdentityProvider(IdentityProvider):
    def __init__(self, identities: dict[str, Identity] | None = None, unavailable: bool = False):
        self.identities = dict(identities or {})
        self.unavailable = unavailable
        self.calls: list[str] = []

    def verify(self, token: str) -> Identity:
        self.calls.append(token)
        if self.unavailable:
            raise IdentityProviderUnavailableError("Identity provider unavailable")
        identity = self.identities.get(token)
        if identity is None:
            raise TokenVerificationError("Token has expired")
        return identity


class InMemoryProfileStore(ProfileStore):
    def __init__(self, profiles: list[Profile] | None = None):
        self.profiles = {p.uid: p for p in profiles or []}
        self.get_calls: list[str] = []

    def get(self, uid: str) -> Profile | None:
        self.get_calls.append(uid)
        return self.profiles.get(uid)

    def update(self, uid: str, fields: dict[str, Any]) -> None:
        profile = self.profiles[uid]
        subscription = profile.subscription or Subscription()
        subscription = subscription.model_copy(
            update={
                "active": fields.get("subscription.active", subscription.active),
                "updated_at": fields.get("subscription.updated_at", subscription.updated_at),
            }
        )
        self.profiles[uid] = profile.model_copy(update={"subscription": subscription})


class InMemoryContentStore(ContentStore):
    def __init__(self, posts: list[Post] | None = None):
        self.posts = {p.id: p for p in posts or []}

    def list(self) -> list[Post]:
        return sorted(self.posts.values(), key=lambda p: p.created_at, reverse=True)

    def get(self, post_id: str) -> Post | None:
        return self.posts.get(post_id)

    def add(self, post: NewPost) -> str:
        post_id = str(uuid4())
        self.posts[post_id] = Post(id=post_id, **post.model_dump())
        return post_id


def make_post(**kwargs) -> Post:
    return Post(
        id=kwargs.get("id", str(uuid4())),
        title=kwargs.get("title", "Title"),
        content=kwargs.get("content", "x" * 500),
        user_email=kwargs.get("user_email", "author@example.com"),
        username=kwargs.get("username", "author"),
        created_at=kwargs.get("created_at", datetime(2024, 1, 1, tzinfo=timezone.utc)),
    )


def make_profile(uid: str, active: bool | None = None, **kwargs) -> Profile:
    subscription = None if active is None else Subscription(active=active)
    return Profile(
        uid=uid,
        email=kwargs.get("email", f"{uid}@example.com"),
        username=kwargs.get("username", uid),
        subscription=subscription,
    )


@pytest.fixture
def identity_provider() -> FakeIdentityProvider:
    return FakeIdentityProvider(TOKENS)


@pytest.fixture
def engine():
    from postwall.db.session import build_engine, init_db

    engine = build_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def app(identity_provider, engine):
    from postwall.main import create_app

    return create_app(identity_provider=identity_provider, engine=engine)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def seed_profile(session_factory):
    from postwall.services.profiles.service import ProfileService

    def _seed(uid: str, *, email: str | None = None, username: str | None = None, active: bool = False):
        db = session_factory()
        try:
            return ProfileService(db).create(uid, email=email, username=username, subscription_active=active)
        finally:
            db.close()

    return _seed


@pytest.fixture
def seed_post(session_factory):
    from postwall.services.posts.service import PostService

    counter = {"n": 0}

    def _seed(title: str = "Post", content: str = "x" * 500, created_at: datetime | None = None) -> str:
        counter["n"] += 1
        db = session_factory()
        try:
            return PostService(db).add(
                NewPost(
                    title=title,
                    content=content,
                    user_email="author@example.com",
                    username="author",
                    created_at=created_at or datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(minutes=counter["n"]),
                )
            )
        finally:
            db.close()

    return _seed


@pytest.fixture
def people(seed_profile):
    """alice is a subscriber, bob is not, carol has no profile."""
    seed_profile("alice", email="alice@example.com", username="alice", active=True)
    seed_profile("bob", email="bob@example.com", username="bobby", active=False)
