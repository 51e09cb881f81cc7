"""Schemas for community feed endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .profile import ProfileSummary


class PostCreate(BaseModel):
    title: str = ""
    content: str = ""


class PostUpdate(BaseModel):
    title: str | None = None
    content: str | None = None

    model_config = ConfigDict(extra="forbid")


class PostRead(BaseModel):
    id: int
    title: str
    content: str
    user_id: str | None = None
    created_at: datetime | None = None
    average_rating: float | None = None
    rating_count: int = 0
    author: ProfileSummary | None = None

    model_config = ConfigDict(from_attributes=True)


class PostBadgeRead(BaseModel):
    type: str
    label: str
    color: str
    icon: str | None = None

    model_config = ConfigDict(from_attributes=True)


class FeedPostRead(BaseModel):
    """Post decorated with badges and formatted for display."""

    id: int
    title: str
    content: str
    excerpt: str
    formatted_date: str
    author_name: str
    author_avatar: str
    average_rating: float | None = None
    rating_count: int = 0
    badges: list[PostBadgeRead] = Field(default_factory=list)
    priority: int = 0
    is_highlighted: bool = False


class RatingCreate(BaseModel):
    rating: int = Field(..., ge=1, le=5)


class PostCommentCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=2000)


class PostCommentRead(BaseModel):
    id: int
    post_id: int
    content: str
    user_id: str | None = None
    created_at: datetime | None = None
    user: ProfileSummary | None = None

    model_config = ConfigDict(from_attributes=True)
