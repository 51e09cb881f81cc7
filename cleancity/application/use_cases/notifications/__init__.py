"""Use cases for push notifications."""

from .factory import (
    create_assignment_notification,
    create_comment_notification,
    create_mention_notification,
    create_resolution_notification,
    create_status_update_notification,
    create_test_notification,
    truncate_preview,
)
from .handlers import NotificationSink, register_notification_handlers
from .send_test import send_test_notification
from .topics import TOPIC_PREFIX, get_user_topic

__all__ = [
    "NotificationSink",
    "TOPIC_PREFIX",
    "create_assignment_notification",
    "create_comment_notification",
    "create_mention_notification",
    "create_resolution_notification",
    "create_status_update_notification",
    "create_test_notification",
    "get_user_topic",
    "register_notification_handlers",
    "send_test_notification",
    "truncate_preview",
]
