"""Use cases for commenting on and rating community posts."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cleancity.application.events import EventBus
from cleancity.application.use_cases.errors import RepositoryError
from cleancity.domain.entities import (
    Post,
    PostComment,
    PostCommented,
    PostEvent,
    PostRated,
    Profile,
)
from cleancity.infrastructure.repositories import PostRepository
from cleancity.utils import Clock, utc_now

MIN_RATING = 1
MAX_RATING = 5


def list_post_comments(session: Session, post_id: int) -> Sequence[PostComment]:
    repository = PostRepository(session)
    if repository.get(post_id) is None:
        raise ValueError("Post not found")
    return repository.list_comments(post_id)


def add_post_comment(
    session: Session,
    bus: EventBus,
    *,
    post_id: int,
    content: str,
    author: Profile,
    clock: Clock = utc_now,
) -> PostComment:
    text = (content or "").strip()
    if not text:
        raise ValueError("Comment content is required")

    repository = PostRepository(session)
    if repository.get(post_id) is None:
        raise ValueError("Post not found")

    try:
        comment = repository.add_comment(
            PostComment(
                id=None, post_id=post_id, content=text, user_id=author.id, created_at=clock()
            )
        )
    except SQLAlchemyError as exc:
        session.rollback()
        raise RepositoryError(f"Failed to add comment: {exc}") from exc

    bus.emit(
        PostEvent.COMMENTED,
        PostCommented(post_id=post_id, user_id=author.id, comment=text),
    )
    return comment


def rate_post(
    session: Session, bus: EventBus, *, post_id: int, rating: int, rater: Profile
) -> Post:
    """Record ``rater``'s rating and return the post with its new average."""

    if not MIN_RATING <= rating <= MAX_RATING:
        raise ValueError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")

    repository = PostRepository(session)
    if repository.get(post_id) is None:
        raise ValueError("Post not found")

    try:
        post = repository.rate(post_id, rater.id, rating)
    except SQLAlchemyError as exc:
        session.rollback()
        raise RepositoryError(f"Failed to rate post: {exc}") from exc

    bus.emit(PostEvent.RATED, PostRated(post_id=post_id, user_id=rater.id, rating=rating))
    return post


__all__ = ["MAX_RATING", "MIN_RATING", "add_post_comment", "list_post_comments", "rate_post"]
