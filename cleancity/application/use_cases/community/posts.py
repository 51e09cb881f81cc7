"""Use cases for community posts."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cleancity.application.events import EventBus
from cleancity.application.use_cases.errors import InvalidPostError, RepositoryError
from cleancity.application.validation import PostValidator, create_basic_validator
from cleancity.domain.entities import (
    Post,
    PostCreated,
    PostDeleted,
    PostDraft,
    PostEvent,
    PostUpdated,
    PostViewed,
    Profile,
)
from cleancity.infrastructure.repositories import PostRepository
from cleancity.utils import Clock, utc_now

logger = logging.getLogger(__name__)


def create_post(
    session: Session,
    bus: EventBus,
    *,
    title: str,
    content: str,
    author: Profile,
    validator: PostValidator | None = None,
    clock: Clock = utc_now,
) -> Post:
    """Validate and store a post, then announce it on ``bus``."""

    draft = PostDraft(title=title or "", content=content or "")
    result = (validator or create_basic_validator()).validate(draft)
    if not result.is_valid:
        raise InvalidPostError(result.errors)

    post = Post(
        id=None,
        title=draft.title.strip(),
        content=draft.content.strip(),
        user_id=author.id,
        created_at=clock(),
    )
    try:
        created = PostRepository(session).create(post)
    except SQLAlchemyError as exc:
        session.rollback()
        raise RepositoryError(f"Failed to create post: {exc}") from exc

    bus.emit(PostEvent.CREATED, PostCreated(post=created, author_id=author.id))
    return created


def get_post(
    session: Session,
    post_id: int,
    *,
    bus: EventBus | None = None,
    viewer_id: str | None = None,
) -> Post:
    """Return a post; when ``bus`` is given the view is announced on it."""

    post = PostRepository(session).get(post_id)
    if post is None:
        raise ValueError("Post not found")
    if bus is not None:
        bus.emit(PostEvent.VIEWED, PostViewed(post_id=post_id, viewer_id=viewer_id))
    return post


def list_posts(session: Session, *, skip: int = 0, limit: int = 100) -> Sequence[Post]:
    return PostRepository(session).list(skip=skip, limit=limit)


def update_post(
    session: Session,
    bus: EventBus,
    *,
    post_id: int,
    editor: Profile,
    title: str | None = None,
    content: str | None = None,
    validator: PostValidator | None = None,
) -> Post:
    """Edit the title or content of a post owned by ``editor``."""

    repository = PostRepository(session)
    current = repository.get(post_id)
    if current is None:
        raise ValueError("Post not found")
    if current.user_id != editor.id:
        raise PermissionError("Only the author can edit this post")

    changes: dict[str, object] = {}
    if title is not None and title.strip() != current.title:
        changes["title"] = title.strip()
    if content is not None and content.strip() != current.content:
        changes["content"] = content.strip()
    if not changes:
        return current

    candidate = replace(current, **changes)
    result = (validator or create_basic_validator()).validate(
        PostDraft(title=candidate.title, content=candidate.content)
    )
    if not result.is_valid:
        raise InvalidPostError(result.errors)

    try:
        updated = repository.update(candidate)
    except SQLAlchemyError as exc:
        session.rollback()
        raise RepositoryError(f"Failed to update post: {exc}") from exc

    bus.emit(PostEvent.UPDATED, PostUpdated(post=updated, changes=changes))
    return updated


def delete_post(session: Session, bus: EventBus, *, post_id: int, requester: Profile) -> None:
    """Delete a post. Only its author may do so."""

    repository = PostRepository(session)
    post = repository.get(post_id)
    if post is None:
        raise ValueError("Post not found")
    if post.user_id != requester.id:
        raise PermissionError("Only the author can delete this post")

    try:
        repository.delete(post_id)
    except SQLAlchemyError as exc:
        session.rollback()
        raise RepositoryError(f"Failed to delete post: {exc}") from exc

    logger.info("Post %s deleted by %s", post_id, requester.id)
    bus.emit(PostEvent.DELETED, PostDeleted(post_id=post_id, deleted_by=requester.id))


__all__ = ["create_post", "delete_post", "get_post", "list_posts", "update_post"]
