"""Persistence layer for community posts, their comments and ratings."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from cleancity.domain.entities import Post, PostComment
from cleancity.infrastructure.models import PostCommentModel, PostModel, PostRatingModel
from cleancity.utils import to_naive_utc

from .profile_repository import profile_to_entity


class PostRepository:
    """Provide CRUD operations for community posts."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, skip: int = 0, limit: int = 100) -> Sequence[Post]:
        query = (
            self.session.query(PostModel)
            .order_by(PostModel.created_at.desc(), PostModel.id.desc())
            .offset(skip)
            .limit(limit)
        )
        models = query.all()
        stats = self._rating_stats([model.id for model in models])
        return [self._to_entity(model, stats.get(model.id)) for model in models]

    def get(self, post_id: int) -> Post | None:
        model = self.session.get(PostModel, post_id)
        if model is None:
            return None
        return self._to_entity(model, self._rating_stats([post_id]).get(post_id))

    def create(self, post: Post) -> Post:
        model = PostModel(title=post.title, content=post.content, user_id=post.user_id)
        if post.created_at:
            model.created_at = to_naive_utc(post.created_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model, None)

    def update(self, post: Post) -> Post:
        model = self.session.get(PostModel, post.id)
        if not model:
            msg = f"Post with id {post.id} not found"
            raise ValueError(msg)
        model.title = post.title
        model.content = post.content
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model, self._rating_stats([model.id]).get(model.id))

    def delete(self, post_id: int) -> None:
        model = self.session.get(PostModel, post_id)
        if not model:
            msg = f"Post with id {post_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def rate(self, post_id: int, user_id: str, rating: int) -> Post:
        """Store ``user_id``'s rating, replacing an earlier one, and return the post."""

        model = (
            self.session.query(PostRatingModel)
            .filter(PostRatingModel.post_id == post_id)
            .filter(PostRatingModel.user_id == user_id)
            .first()
        )
        if model is None:
            model = PostRatingModel(post_id=post_id, user_id=user_id)
        model.rating = rating
        self.session.add(model)
        self.session.commit()
        post = self.get(post_id)
        if post is None:
            msg = f"Post with id {post_id} not found"
            raise ValueError(msg)
        return post

    def get_user_rating(self, post_id: int, user_id: str) -> int | None:
        model = (
            self.session.query(PostRatingModel)
            .filter(PostRatingModel.post_id == post_id)
            .filter(PostRatingModel.user_id == user_id)
            .first()
        )
        return model.rating if model else None

    def list_comments(self, post_id: int) -> Sequence[PostComment]:
        query = (
            self.session.query(PostCommentModel)
            .filter(PostCommentModel.post_id == post_id)
            .order_by(PostCommentModel.created_at, PostCommentModel.id)
        )
        return [self._comment_to_entity(model) for model in query.all()]

    def add_comment(self, comment: PostComment) -> PostComment:
        model = PostCommentModel(
            post_id=comment.post_id, user_id=comment.user_id, content=comment.content
        )
        if comment.created_at:
            model.created_at = to_naive_utc(comment.created_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._comment_to_entity(model)

    def _rating_stats(self, post_ids: list[int]) -> dict[int, tuple[float, int]]:
        if not post_ids:
            return {}
        rows = (
            self.session.query(
                PostRatingModel.post_id,
                func.avg(PostRatingModel.rating),
                func.count(PostRatingModel.id),
            )
            .filter(PostRatingModel.post_id.in_(post_ids))
            .group_by(PostRatingModel.post_id)
            .all()
        )
        return {post_id: (float(average), int(count)) for post_id, average, count in rows}

    @staticmethod
    def _to_entity(model: PostModel, stats: tuple[float, int] | None) -> Post:
        average, count = stats if stats else (None, 0)
        return Post(
            id=model.id,
            title=model.title,
            content=model.content,
            user_id=model.user_id,
            created_at=model.created_at,
            average_rating=average,
            rating_count=count,
            author=profile_to_entity(model.author),
        )

    @staticmethod
    def _comment_to_entity(model: PostCommentModel) -> PostComment:
        return PostComment(
            id=model.id,
            post_id=model.post_id,
            content=model.content,
            user_id=model.user_id,
            created_at=model.created_at,
            user=profile_to_entity(model.user),
        )
