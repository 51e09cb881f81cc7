"""Value objects describing presentation badges."""

from __future__ import annotations

from dataclasses import dataclass

BADGE_NEW = "new"
BADGE_POPULAR = "popular"
BADGE_TRENDING = "trending"
BADGE_PINNED = "pinned"
BADGE_VERIFIED = "verified"

POST_BADGE_TYPES = (
    BADGE_NEW,
    BADGE_POPULAR,
    BADGE_TRENDING,
    BADGE_PINNED,
    BADGE_VERIFIED,
)


@dataclass(frozen=True)
class PostBadge:
    """Badge attached to a post when it is rendered."""

    type: str
    label: str
    color: str
    icon: str | None = None


@dataclass(frozen=True)
class RenderedBadge:
    """Visual badge produced by the badge factory."""

    label: str
    variant: str
    class_name: str | None = None


__all__ = [
    "BADGE_NEW",
    "BADGE_PINNED",
    "BADGE_POPULAR",
    "BADGE_TRENDING",
    "BADGE_VERIFIED",
    "POST_BADGE_TYPES",
    "PostBadge",
    "RenderedBadge",
]
