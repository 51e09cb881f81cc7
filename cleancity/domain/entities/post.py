"""Domain entities for the community feed."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .profile import Profile


@dataclass(frozen=True)
class Post:
    """Community post together with its author profile.

    ``average_rating`` is ``None`` until the post receives its first rating.
    """

    id: int | None
    title: str
    content: str
    user_id: str | None
    created_at: datetime | None
    average_rating: float | None = None
    rating_count: int = 0
    author: Profile | None = None


@dataclass
class PostComment:
    """Comment written under a community post."""

    id: int | None
    post_id: int
    content: str
    user_id: str | None = None
    created_at: datetime | None = None
    user: Profile | None = None


__all__ = ["Post", "PostComment"]
