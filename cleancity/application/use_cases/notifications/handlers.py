"""Turn report events into push notifications."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

from cleancity.application.events import EventBus, Subscription
from cleancity.domain.entities import (
    NotificationEvent,
    PushNotification,
    ReportAssigned,
    ReportCommented,
    ReportResolved,
    ReportStatusChanged,
    UserMentioned,
)

from .factory import (
    create_assignment_notification,
    create_comment_notification,
    create_mention_notification,
    create_resolution_notification,
    create_status_update_notification,
)
from .topics import TOPIC_PREFIX, get_user_topic

logger = logging.getLogger(__name__)


class NotificationSink(Protocol):
    def deliver(self, notification: PushNotification) -> Any: ...


def register_notification_handlers(
    bus: EventBus,
    dispatcher: NotificationSink,
    *,
    base_url: str,
    topic_prefix: str = TOPIC_PREFIX,
) -> list[Subscription]:
    """Subscribe one handler per notification event and return the handles."""

    def topic_for(username: str) -> str:
        return get_user_topic(username, topic_prefix)

    def send(event: NotificationEvent, notification: PushNotification) -> None:
        result = dispatcher.deliver(notification)
        logger.debug(
            "Handled %s for topic %s: %s", event.value, notification.topic, result
        )

    def on_commented(event: ReportCommented) -> None:
        send(
            NotificationEvent.REPORT_COMMENTED,
            create_comment_notification(
                topic=topic_for(event.report_owner_username),
                report_id=event.report_id,
                commenter_name=event.commenter_name,
                comment_preview=event.comment_preview,
                report_title=event.report_title,
                base_url=base_url,
            ),
        )

    def on_status_changed(event: ReportStatusChanged) -> None:
        send(
            NotificationEvent.REPORT_STATUS_CHANGED,
            create_status_update_notification(
                topic=topic_for(event.report_owner_username),
                report_id=event.report_id,
                old_status=event.old_status,
                new_status=event.new_status,
                report_title=event.report_title,
                base_url=base_url,
            ),
        )

    def on_assigned(event: ReportAssigned) -> None:
        send(
            NotificationEvent.REPORT_ASSIGNED,
            create_assignment_notification(
                topic=topic_for(event.assignee_username),
                report_id=event.report_id,
                assignee_name=event.assignee_name,
                report_title=event.report_title,
                report_location=event.report_location,
                base_url=base_url,
            ),
        )

    def on_resolved(event: ReportResolved) -> None:
        send(
            NotificationEvent.REPORT_RESOLVED,
            create_resolution_notification(
                topic=topic_for(event.report_owner_username),
                report_id=event.report_id,
                report_title=event.report_title,
                resolved_by=event.resolved_by,
                base_url=base_url,
            ),
        )

    def on_mentioned(event: UserMentioned) -> None:
        send(
            NotificationEvent.USER_MENTIONED,
            create_mention_notification(
                topic=topic_for(event.mentioned_username),
                report_id=event.report_id,
                mentioner_name=event.mentioner_name,
                context=event.context,
                base_url=base_url,
            ),
        )

    handlers: dict[NotificationEvent, Callable[[Any], None]] = {
        NotificationEvent.REPORT_COMMENTED: on_commented,
        NotificationEvent.REPORT_STATUS_CHANGED: on_status_changed,
        NotificationEvent.REPORT_ASSIGNED: on_assigned,
        NotificationEvent.REPORT_RESOLVED: on_resolved,
        NotificationEvent.USER_MENTIONED: on_mentioned,
    }
    subscriptions = [bus.subscribe(event, handler) for event, handler in handlers.items()]
    logger.info("Registered %d notification handlers", len(subscriptions))
    return subscriptions


__all__ = ["NotificationSink", "register_notification_handlers"]
