"""Decorator chains computing presentation data for posts and notifications."""

from . import notifications, posts
from .notifications import (
    DecoratedNotification,
    NotificationDecoratorChain,
)
from .posts import DecoratedPost, PostDecoratorChain

__all__ = [
    "DecoratedNotification",
    "DecoratedPost",
    "NotificationDecoratorChain",
    "PostDecoratorChain",
    "notifications",
    "posts",
]
