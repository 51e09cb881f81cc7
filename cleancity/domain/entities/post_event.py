"""Domain events raised by community feed operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .post import Post


class PostEvent(str, Enum):
    """Event types published when posts change."""

    CREATED = "post:created"
    UPDATED = "post:updated"
    DELETED = "post:deleted"
    RATED = "post:rated"
    COMMENTED = "post:commented"
    VIEWED = "post:viewed"


@dataclass(frozen=True)
class PostCreated:
    post: Post
    author_id: str


@dataclass(frozen=True)
class PostUpdated:
    post: Post
    changes: dict[str, object]


@dataclass(frozen=True)
class PostDeleted:
    post_id: int
    deleted_by: str


@dataclass(frozen=True)
class PostRated:
    post_id: int
    user_id: str
    rating: int


@dataclass(frozen=True)
class PostCommented:
    post_id: int
    user_id: str
    comment: str


@dataclass(frozen=True)
class PostViewed:
    post_id: int
    viewer_id: str | None = None


__all__ = [
    "PostCommented",
    "PostCreated",
    "PostDeleted",
    "PostEvent",
    "PostRated",
    "PostUpdated",
    "PostViewed",
]
