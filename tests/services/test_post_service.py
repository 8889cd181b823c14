"""Tests for PostService against in-memory SQLite."""
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from postwall.core.errors import StoreError
from postwall.services.posts.service import PostService
from postwall.storage.base import NewPost


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


def _new(title: str, month: int) -> NewPost:
    return NewPost(
        title=title,
        content=f"{title} body",
        user_email="a@example.com",
        username="a",
        created_at=datetime(2024, month, 1, tzinfo=timezone.utc),
    )


def test_add_assigns_id_and_get_returns_post(db):
    svc = PostService(db)
    post_id = svc.add(_new("first", 1))
    assert post_id
    post = svc.get(post_id)
    assert post.title == "first"
    assert post.content == "first body"
    assert post.created_at == datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_get_unknown_returns_none(db):
    assert PostService(db).get("missing") is None


def test_list_newest_first(db):
    svc = PostService(db)
    svc.add(_new("jan", 1))
    svc.add(_new("mar", 3))
    svc.add(_new("feb", 2))
    assert [p.title for p in svc.list()] == ["mar", "feb", "jan"]


def test_list_failure_becomes_store_error():
    db = MagicMock()
    db.query.side_effect = OperationalError("SELECT", {}, Exception("db down"))
    with pytest.raises(StoreError):
        PostService(db).list()
