"""Use case assembling the decorated and formatted community feed."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from cleancity.application.decorators.posts import DecoratedPost, PostDecoratorChain
from cleancity.application.formatting import BasePostFormatter, FormattedPost
from cleancity.infrastructure.repositories import PostRepository


@dataclass(frozen=True)
class FeedEntry:
    decorated: DecoratedPost
    formatted: FormattedPost


def list_decorated_posts(
    session: Session,
    *,
    chain: PostDecoratorChain,
    formatter: BasePostFormatter,
    skip: int = 0,
    limit: int = 100,
    sort_by_priority: bool = True,
    only_highlighted: bool = False,
) -> list[FeedEntry]:
    """Return posts with their badges and display text.

    Posts come newest first. With ``sort_by_priority`` the highest decorator
    priority leads; equal priorities keep the newest-first order.
    """

    posts = PostRepository(session).list(skip=skip, limit=limit)
    decorated_posts = chain.decorate_many(posts)
    if only_highlighted:
        decorated_posts = [item for item in decorated_posts if item.is_highlighted]
    if sort_by_priority:
        decorated_posts = sorted(decorated_posts, key=lambda item: item.priority, reverse=True)
    return [
        FeedEntry(decorated=decorated, formatted=formatter.format_post(decorated.post))
        for decorated in decorated_posts
    ]


__all__ = ["FeedEntry", "list_decorated_posts"]
