"""Event bus and reusable event handlers."""

from .bus import EventBus, EventHandler, Subscription
from .post_handlers import create_logging_handler, create_post_created_handler

__all__ = [
    "EventBus",
    "EventHandler",
    "Subscription",
    "create_logging_handler",
    "create_post_created_handler",
]
