"""Use cases for the community feed."""

from .feed import FeedEntry, list_decorated_posts
from .interactions import add_post_comment, list_post_comments, rate_post
from .posts import create_post, delete_post, get_post, list_posts, update_post

__all__ = [
    "FeedEntry",
    "add_post_comment",
    "create_post",
    "delete_post",
    "get_post",
    "list_decorated_posts",
    "list_post_comments",
    "list_posts",
    "rate_post",
    "update_post",
]
