"""Use case for sending a user a test push notification."""

from __future__ import annotations

from cleancity.domain.entities import Profile

from .factory import create_test_notification
from .handlers import NotificationSink
from .topics import TOPIC_PREFIX, get_user_topic


def send_test_notification(
    profile: Profile,
    dispatcher: NotificationSink,
    *,
    topic_prefix: str = TOPIC_PREFIX,
):
    """Deliver the test notification to ``profile``'s topic and return the result."""

    if not profile.username:
        raise ValueError("Profile has no username")
    topic = get_user_topic(profile.username, topic_prefix)
    return dispatcher.deliver(create_test_notification(topic=topic))
