"""Domain entities for push notifications sent through the relay."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

NOTIFICATION_COMMENT = "comment"
NOTIFICATION_STATUS_UPDATE = "status_update"
NOTIFICATION_ASSIGNMENT = "assignment"
NOTIFICATION_RESOLUTION = "resolution"
NOTIFICATION_MENTION = "mention"

NOTIFICATION_TYPES = (
    NOTIFICATION_COMMENT,
    NOTIFICATION_STATUS_UPDATE,
    NOTIFICATION_ASSIGNMENT,
    NOTIFICATION_RESOLUTION,
    NOTIFICATION_MENTION,
)

MIN_PRIORITY = 1
MAX_PRIORITY = 5


@dataclass(frozen=True)
class NotificationAction:
    """Button shown next to a push notification."""

    action: str
    label: str
    url: str | None = None
    method: str | None = None
    headers: dict[str, str] | None = None
    body: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"action": self.action, "label": self.label}
        for key in ("url", "method", "headers", "body"):
            value = getattr(self, key)
            if value is not None:
                payload[key] = value
        return payload


@dataclass(frozen=True)
class PushNotification:
    """Message addressed to a relay topic.

    ``priority`` follows the relay scale: 1 (min) to 5 (max).
    """

    topic: str
    message: str
    title: str | None = None
    priority: int | None = None
    tags: tuple[str, ...] = ()
    click: str | None = None
    actions: tuple[NotificationAction, ...] = ()
    icon: str | None = None
    markdown: bool | None = None
    delay: str | None = None
    email: str | None = None
    attach: str | None = None

    def __post_init__(self) -> None:
        if self.priority is not None and not MIN_PRIORITY <= self.priority <= MAX_PRIORITY:
            raise ValueError(
                f"Notification priority must be between {MIN_PRIORITY} and {MAX_PRIORITY}"
            )

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body accepted by the relay publish endpoint."""

        payload: dict[str, Any] = {"topic": self.topic, "message": self.message}
        if self.title is not None:
            payload["title"] = self.title
        if self.priority is not None:
            payload["priority"] = self.priority
        if self.tags:
            payload["tags"] = list(self.tags)
        if self.click is not None:
            payload["click"] = self.click
        if self.actions:
            payload["actions"] = [action.to_payload() for action in self.actions]
        for key in ("icon", "markdown", "delay", "email", "attach"):
            value = getattr(self, key)
            if value is not None:
                payload[key] = value
        return payload


__all__ = [
    "MAX_PRIORITY",
    "MIN_PRIORITY",
    "NOTIFICATION_ASSIGNMENT",
    "NOTIFICATION_COMMENT",
    "NOTIFICATION_MENTION",
    "NOTIFICATION_RESOLUTION",
    "NOTIFICATION_STATUS_UPDATE",
    "NOTIFICATION_TYPES",
    "NotificationAction",
    "PushNotification",
]
