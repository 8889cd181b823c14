"""
Collaborator contracts for profile and content storage.
Records are plain pydantic snapshots; stores own persistence and consistency.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from pydantic import BaseModel


class Subscription(BaseModel):
    active: bool = False
    updated_at: datetime | None = None

    model_config = {"frozen": True}


class Profile(BaseModel):
    uid: str
    email: str | None = None
    username: str | None = None
    subscription: Subscription | None = None

    model_config = {"frozen": True}


class NewPost(BaseModel):
    title: str
    content: str
    user_email: str | None = None
    username: str
    created_at: datetime

    model_config = {"frozen": True}


class Post(NewPost):
    id: str


class ProfileStore(ABC):
    @abstractmethod
    def get(self, uid: str) -> Profile | None:
        raise NotImplementedError

    @abstractmethod
    def update(self, uid: str, fields: dict[str, Any]) -> None:
        """Write the given fields; `subscription.active` / `subscription.updated_at` use dotted keys."""
        raise NotImplementedError


class ContentStore(ABC):
    @abstractmethod
    def list(self) -> list[Post]:
        """All posts, newest first by created_at."""
        raise NotImplementedError

    @abstractmethod
    def get(self, post_id: str) -> Post | None:
        raise NotImplementedError

    @abstractmethod
    def add(self, post: NewPost) -> str:
        """Persist a new post; returns the server-assigned id."""
        raise NotImplementedError
