"""Presentation decorators for community posts.

Each decorator looks at a post on its own and returns the badges, priority
and highlight flag it contributes. :class:`PostDecoratorChain` folds those
contributions together: badges are concatenated, priority is the maximum
and the highlight flag is set when any decorator sets it. Posts are never
modified; every decoration wraps the original record.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from cleancity.domain.entities import (
    BADGE_NEW,
    BADGE_POPULAR,
    BADGE_TRENDING,
    BADGE_VERIFIED,
    Post,
    PostBadge,
)
from cleancity.utils import Clock, hours_between, utc_now

TRENDING_MAX_AGE_HOURS = 48
TRENDING_MIN_RATING = 3.5


@dataclass(frozen=True)
class DecoratedPost:
    """A post together with the presentation data computed for it."""

    post: Post
    badges: tuple[PostBadge, ...] = ()
    priority: int = 0
    is_highlighted: bool = False

    @property
    def id(self) -> int | None:
        return self.post.id

    def badge_types(self) -> list[str]:
        return [badge.type for badge in self.badges]


class PostDecorator(Protocol):
    def decorate(self, post: Post) -> DecoratedPost: ...


def _age_in_hours(post: Post, clock: Clock) -> float | None:
    if post.created_at is None:
        return None
    return hours_between(post.created_at, clock())


def _has_rating_at_least(post: Post, threshold: float) -> bool:
    return post.average_rating is not None and post.average_rating >= threshold


class NewPostDecorator:
    """Mark posts younger than ``hours_threshold`` as new."""

    def __init__(self, hours_threshold: float = 24, *, clock: Clock = utc_now) -> None:
        self.hours_threshold = hours_threshold
        self._clock = clock

    def decorate(self, post: Post) -> DecoratedPost:
        age = _age_in_hours(post, self._clock)
        if age is None or age > self.hours_threshold:
            return DecoratedPost(post=post)
        badge = PostBadge(type=BADGE_NEW, label="Novo", color="bg-green-500", icon="✨")
        return DecoratedPost(post=post, badges=(badge,), priority=1)


class PopularPostDecorator:
    """Highlight posts whose average rating reaches ``rating_threshold``."""

    def __init__(self, rating_threshold: float = 4.0) -> None:
        self.rating_threshold = rating_threshold

    def decorate(self, post: Post) -> DecoratedPost:
        if not _has_rating_at_least(post, self.rating_threshold):
            return DecoratedPost(post=post)
        badge = PostBadge(
            type=BADGE_POPULAR, label="Popularno", color="bg-yellow-500", icon="⭐"
        )
        return DecoratedPost(post=post, badges=(badge,), priority=2, is_highlighted=True)


class TrendingPostDecorator:
    """Highlight recent posts (48h) that are rated 3.5 or better."""

    def __init__(self, *, clock: Clock = utc_now) -> None:
        self._clock = clock

    def decorate(self, post: Post) -> DecoratedPost:
        age = _age_in_hours(post, self._clock)
        is_recent = age is not None and age <= TRENDING_MAX_AGE_HOURS
        if not (is_recent and _has_rating_at_least(post, TRENDING_MIN_RATING)):
            return DecoratedPost(post=post)
        badge = PostBadge(
            type=BADGE_TRENDING, label="U trendu", color="bg-orange-500", icon="🔥"
        )
        return DecoratedPost(post=post, badges=(badge,), priority=3, is_highlighted=True)


class VerifiedAuthorDecorator:
    """Badge posts written by one of ``verified_user_ids``."""

    def __init__(self, verified_user_ids: Iterable[str] = ()) -> None:
        self.verified_user_ids = frozenset(verified_user_ids)

    def decorate(self, post: Post) -> DecoratedPost:
        if post.user_id is None or post.user_id not in self.verified_user_ids:
            return DecoratedPost(post=post)
        badge = PostBadge(
            type=BADGE_VERIFIED, label="Verificirano", color="bg-blue-500", icon="✔️"
        )
        return DecoratedPost(post=post, badges=(badge,))


def merge_badges(
    current: tuple[PostBadge, ...], added: tuple[PostBadge, ...]
) -> tuple[PostBadge, ...]:
    return current + added


def merge_priority(current: int, added: int) -> int:
    return max(current, added)


def merge_highlight(current: bool, added: bool) -> bool:
    return current or added


@dataclass
class PostDecoratorChain:
    """Apply several decorators to a post and merge their results."""

    decorators: list[PostDecorator] = field(default_factory=list)

    def add_decorator(self, decorator: PostDecorator) -> "PostDecoratorChain":
        self.decorators.append(decorator)
        return self

    def decorate(self, post: Post) -> DecoratedPost:
        badges: tuple[PostBadge, ...] = ()
        priority = 0
        highlighted = False
        for decorator in self.decorators:
            result = decorator.decorate(post)
            badges = merge_badges(badges, result.badges)
            priority = merge_priority(priority, result.priority)
            highlighted = merge_highlight(highlighted, result.is_highlighted)
        return DecoratedPost(
            post=post, badges=badges, priority=priority, is_highlighted=highlighted
        )

    def decorate_many(self, posts: Sequence[Post]) -> list[DecoratedPost]:
        return [self.decorate(post) for post in posts]


def create_default_decorator_chain(*, clock: Clock = utc_now) -> PostDecoratorChain:
    return (
        PostDecoratorChain()
        .add_decorator(NewPostDecorator(24, clock=clock))
        .add_decorator(PopularPostDecorator(4))
        .add_decorator(TrendingPostDecorator(clock=clock))
    )


def create_minimal_decorator_chain(*, clock: Clock = utc_now) -> PostDecoratorChain:
    return PostDecoratorChain().add_decorator(NewPostDecorator(12, clock=clock))


def create_configured_decorator_chain(
    *,
    new_hours: float,
    popular_rating: float,
    verified_author_ids: Iterable[str] = (),
    clock: Clock = utc_now,
) -> PostDecoratorChain:
    """Build the chain used by the feed from configurable thresholds."""

    chain = (
        PostDecoratorChain()
        .add_decorator(NewPostDecorator(new_hours, clock=clock))
        .add_decorator(PopularPostDecorator(popular_rating))
        .add_decorator(TrendingPostDecorator(clock=clock))
    )
    verified = list(verified_author_ids)
    if verified:
        chain.add_decorator(VerifiedAuthorDecorator(verified))
    return chain


__all__ = [
    "DecoratedPost",
    "NewPostDecorator",
    "PopularPostDecorator",
    "PostDecorator",
    "PostDecoratorChain",
    "TrendingPostDecorator",
    "VerifiedAuthorDecorator",
    "create_configured_decorator_chain",
    "create_default_decorator_chain",
    "create_minimal_decorator_chain",
    "merge_badges",
    "merge_highlight",
    "merge_priority",
]
