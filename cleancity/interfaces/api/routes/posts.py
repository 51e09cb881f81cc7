"""Routes for the community feed."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from cleancity.application.decorators.posts import PostDecoratorChain
from cleancity.application.events import EventBus
from cleancity.application.formatting import BasePostFormatter
from cleancity.application.use_cases import RepositoryError
from cleancity.application.use_cases.community import (
    FeedEntry,
    add_post_comment as add_post_comment_uc,
    create_post as create_post_uc,
    delete_post as delete_post_uc,
    get_post as get_post_uc,
    list_decorated_posts as list_decorated_posts_uc,
    list_post_comments as list_post_comments_uc,
    rate_post as rate_post_uc,
    update_post as update_post_uc,
)
from cleancity.domain.entities import Profile
from cleancity.infrastructure.database import get_db
from cleancity.interfaces.api.dependencies import (
    get_current_profile,
    get_event_bus,
    get_post_decorator_chain,
    get_post_formatter,
)
from cleancity.interfaces.api.routes_helpers import to_http_exception
from cleancity.interfaces.api.schemas import (
    FeedPostRead,
    PostBadgeRead,
    PostCommentCreate,
    PostCommentRead,
    PostCreate,
    PostRead,
    PostUpdate,
    RatingCreate,
)

router = APIRouter(prefix="/posts", tags=["community"])


def _feed_entry_to_read_model(entry: FeedEntry) -> FeedPostRead:
    formatted = entry.formatted
    decorated = entry.decorated
    return FeedPostRead(
        id=formatted.id,
        title=formatted.title,
        content=formatted.content,
        excerpt=formatted.excerpt,
        formatted_date=formatted.formatted_date,
        author_name=formatted.author_name,
        author_avatar=formatted.author_avatar,
        average_rating=decorated.post.average_rating,
        rating_count=decorated.post.rating_count,
        badges=[PostBadgeRead.model_validate(badge) for badge in decorated.badges],
        priority=decorated.priority,
        is_highlighted=decorated.is_highlighted,
    )


@router.get("/", response_model=list[FeedPostRead])
def list_feed(
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=50, ge=1, le=200),
    sort_by_priority: bool = Query(default=True),
    only_highlighted: bool = Query(default=False),
    db: Session = Depends(get_db),
    chain: PostDecoratorChain = Depends(get_post_decorator_chain),
    formatter: BasePostFormatter = Depends(get_post_formatter),
) -> list[FeedPostRead]:
    """Return the newest posts with their badges, formatted in the requested style."""

    entries = list_decorated_posts_uc(
        db,
        chain=chain,
        formatter=formatter,
        skip=skip,
        limit=limit,
        sort_by_priority=sort_by_priority,
        only_highlighted=only_highlighted,
    )
    return [_feed_entry_to_read_model(entry) for entry in entries]


@router.post("/", response_model=PostRead, status_code=status.HTTP_201_CREATED)
def create_post(
    payload: PostCreate,
    db: Session = Depends(get_db),
    bus: EventBus = Depends(get_event_bus),
    current_profile: Profile = Depends(get_current_profile),
) -> PostRead:
    try:
        post = create_post_uc(
            db, bus, title=payload.title, content=payload.content, author=current_profile
        )
    except (ValueError, RepositoryError) as exc:
        raise to_http_exception(exc) from exc
    return PostRead.model_validate(post)


@router.get("/{post_id}", response_model=PostRead)
def get_post(
    post_id: int,
    db: Session = Depends(get_db),
    bus: EventBus = Depends(get_event_bus),
) -> PostRead:
    try:
        post = get_post_uc(db, post_id, bus=bus)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return PostRead.model_validate(post)


@router.patch("/{post_id}", response_model=PostRead)
def update_post(
    post_id: int,
    payload: PostUpdate,
    db: Session = Depends(get_db),
    bus: EventBus = Depends(get_event_bus),
    current_profile: Profile = Depends(get_current_profile),
) -> PostRead:
    try:
        post = update_post_uc(
            db,
            bus,
            post_id=post_id,
            editor=current_profile,
            title=payload.title,
            content=payload.content,
        )
    except (ValueError, PermissionError, RepositoryError) as exc:
        raise to_http_exception(exc) from exc
    return PostRead.model_validate(post)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(
    post_id: int,
    db: Session = Depends(get_db),
    bus: EventBus = Depends(get_event_bus),
    current_profile: Profile = Depends(get_current_profile),
) -> Response:
    try:
        delete_post_uc(db, bus, post_id=post_id, requester=current_profile)
    except (ValueError, PermissionError, RepositoryError) as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{post_id}/comments", response_model=list[PostCommentRead])
def list_post_comments(post_id: int, db: Session = Depends(get_db)) -> list[PostCommentRead]:
    try:
        comments = list_post_comments_uc(db, post_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return [PostCommentRead.model_validate(comment) for comment in comments]


@router.post(
    "/{post_id}/comments",
    response_model=PostCommentRead,
    status_code=status.HTTP_201_CREATED,
)
def add_post_comment(
    post_id: int,
    payload: PostCommentCreate,
    db: Session = Depends(get_db),
    bus: EventBus = Depends(get_event_bus),
    current_profile: Profile = Depends(get_current_profile),
) -> PostCommentRead:
    try:
        comment = add_post_comment_uc(
            db, bus, post_id=post_id, content=payload.content, author=current_profile
        )
    except (ValueError, RepositoryError) as exc:
        raise to_http_exception(exc) from exc
    return PostCommentRead.model_validate(comment)


@router.put("/{post_id}/rating", response_model=PostRead)
def rate_post(
    post_id: int,
    payload: RatingCreate,
    db: Session = Depends(get_db),
    bus: EventBus = Depends(get_event_bus),
    current_profile: Profile = Depends(get_current_profile),
) -> PostRead:
    try:
        post = rate_post_uc(
            db, bus, post_id=post_id, rating=payload.rating, rater=current_profile
        )
    except (ValueError, RepositoryError) as exc:
        raise to_http_exception(exc) from exc
    return PostRead.model_validate(post)
