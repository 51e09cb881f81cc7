"""Pydantic schemas exposed by the HTTP API."""

from .notification import DeliveryRead, TopicRead
from .post import (
    FeedPostRead,
    PostBadgeRead,
    PostCommentCreate,
    PostCommentRead,
    PostCreate,
    PostRead,
    PostUpdate,
    RatingCreate,
)
from .profile import ProfileSummary
from .report import CategoryRead, CommentCreate, CommentRead, ReportCreate, ReportRead, StatusRead
from .ticket import BadgeRead, PriorityOptionRead, TicketBadges, TicketRead, TicketUpdate

__all__ = [
    "BadgeRead",
    "CategoryRead",
    "CommentCreate",
    "CommentRead",
    "DeliveryRead",
    "FeedPostRead",
    "PostBadgeRead",
    "PostCommentCreate",
    "PostCommentRead",
    "PostCreate",
    "PostRead",
    "PostUpdate",
    "PriorityOptionRead",
    "ProfileSummary",
    "RatingCreate",
    "ReportCreate",
    "ReportRead",
    "StatusRead",
    "TicketBadges",
    "TicketRead",
    "TicketUpdate",
    "TopicRead",
]
