"""Presentation decorators for push notifications.

Decoration happens in stages. :class:`PriorityNotificationDecorator` is the
base stage: it turns a :class:`PushNotification` into a
:class:`DecoratedNotification`. Enrichers such as the timestamp and
category icon decorators only accept an already decorated notification, so
they cannot run before the base stage.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Protocol

from cleancity.domain.entities import (
    NOTIFICATION_ASSIGNMENT,
    NOTIFICATION_COMMENT,
    NOTIFICATION_MENTION,
    NOTIFICATION_RESOLUTION,
    NOTIFICATION_STATUS_UPDATE,
    PushNotification,
)
from cleancity.utils import Clock, relative_time_label, seconds_between, utc_now

DEFAULT_NOTIFICATION_PRIORITY = 3

URGENCY_LOW = "low"
URGENCY_MEDIUM = "medium"
URGENCY_HIGH = "high"
URGENCY_CRITICAL = "critical"

_URGENCY_BADGES: dict[str, tuple[str, ...]] = {
    URGENCY_CRITICAL: ("🔴", "URGENT"),
    URGENCY_HIGH: ("🟠", "HIGH"),
    URGENCY_MEDIUM: ("🟡", "MEDIUM"),
    URGENCY_LOW: (),
}

CATEGORY_ICONS: dict[str, str] = {
    NOTIFICATION_COMMENT: "💬",
    NOTIFICATION_STATUS_UPDATE: "📊",
    NOTIFICATION_ASSIGNMENT: "📋",
    NOTIFICATION_RESOLUTION: "✅",
    NOTIFICATION_MENTION: "📢",
}


def _mentions(message_word: str, title_word: str) -> Callable[[str, str], bool]:
    return lambda message, title: message_word in message or title_word in title


# Keyword heuristics, checked top to bottom; the first match wins.
CATEGORY_RULES: tuple[tuple[Callable[[str, str], bool], str], ...] = (
    (_mentions("comment", "comment"), NOTIFICATION_COMMENT),
    (_mentions("status", "status"), NOTIFICATION_STATUS_UPDATE),
    (_mentions("assigned", "assignment"), NOTIFICATION_ASSIGNMENT),
    (_mentions("resolved", "resolved"), NOTIFICATION_RESOLUTION),
    (_mentions("mentioned", "mentioned"), NOTIFICATION_MENTION),
)
DEFAULT_CATEGORY = NOTIFICATION_COMMENT


@dataclass(frozen=True)
class NotificationDecorations:
    priority: int
    urgency_level: str
    is_read: bool
    timestamp: datetime
    category: str
    badges: tuple[str, ...] = ()
    time_ago: str | None = None
    category_icon: str | None = None


@dataclass(frozen=True)
class DecoratedNotification:
    notification: PushNotification
    decorations: NotificationDecorations


class NotificationEnricher(Protocol):
    def decorate(self, notification: DecoratedNotification) -> DecoratedNotification: ...


def calculate_urgency(priority: int) -> str:
    if priority >= 5:
        return URGENCY_CRITICAL
    if priority >= 4:
        return URGENCY_HIGH
    if priority >= 3:
        return URGENCY_MEDIUM
    return URGENCY_LOW


def infer_category(notification: PushNotification) -> str:
    message = notification.message.lower()
    title = (notification.title or "").lower()
    for matches, category in CATEGORY_RULES:
        if matches(message, title):
            return category
    return DEFAULT_CATEGORY


class PriorityNotificationDecorator:
    """Base stage deriving urgency, category and badges from a notification."""

    def __init__(self, *, clock: Clock = utc_now) -> None:
        self._clock = clock

    def decorate(self, notification: PushNotification) -> DecoratedNotification:
        priority = notification.priority or DEFAULT_NOTIFICATION_PRIORITY
        urgency = calculate_urgency(priority)
        decorations = NotificationDecorations(
            priority=priority,
            urgency_level=urgency,
            is_read=False,
            timestamp=self._clock(),
            category=infer_category(notification),
            badges=_URGENCY_BADGES[urgency],
        )
        return DecoratedNotification(notification=notification, decorations=decorations)


class TimestampNotificationDecorator:
    """Add a human readable "time ago" label."""

    def __init__(self, *, clock: Clock = utc_now) -> None:
        self._clock = clock

    def decorate(self, notification: DecoratedNotification) -> DecoratedNotification:
        seconds = seconds_between(notification.decorations.timestamp, self._clock())
        decorations = replace(
            notification.decorations, time_ago=relative_time_label(seconds)
        )
        return replace(notification, decorations=decorations)


class CategoryIconDecorator:
    """Add the glyph matching the notification category."""

    def decorate(self, notification: DecoratedNotification) -> DecoratedNotification:
        icon = CATEGORY_ICONS.get(notification.decorations.category)
        decorations = replace(notification.decorations, category_icon=icon)
        return replace(notification, decorations=decorations)


@dataclass
class NotificationDecoratorChain:
    """Run the base stage followed by every registered enricher."""

    enrichers: list[NotificationEnricher] = field(default_factory=list)
    base: PriorityNotificationDecorator = field(
        default_factory=PriorityNotificationDecorator
    )

    def add_decorator(self, enricher: NotificationEnricher) -> "NotificationDecoratorChain":
        self.enrichers.append(enricher)
        return self

    def decorate(self, notification: PushNotification) -> DecoratedNotification:
        decorated = self.base.decorate(notification)
        for enricher in self.enrichers:
            decorated = enricher.decorate(decorated)
        return decorated

    def decorate_many(
        self, notifications: Sequence[PushNotification]
    ) -> list[DecoratedNotification]:
        return [self.decorate(notification) for notification in notifications]


def create_default_decorator_chain(*, clock: Clock = utc_now) -> NotificationDecoratorChain:
    return (
        NotificationDecoratorChain(base=PriorityNotificationDecorator(clock=clock))
        .add_decorator(TimestampNotificationDecorator(clock=clock))
        .add_decorator(CategoryIconDecorator())
    )


def create_minimal_decorator_chain(*, clock: Clock = utc_now) -> NotificationDecoratorChain:
    return NotificationDecoratorChain(base=PriorityNotificationDecorator(clock=clock))


__all__ = [
    "CATEGORY_ICONS",
    "CATEGORY_RULES",
    "CategoryIconDecorator",
    "DecoratedNotification",
    "NotificationDecorations",
    "NotificationDecoratorChain",
    "NotificationEnricher",
    "PriorityNotificationDecorator",
    "TimestampNotificationDecorator",
    "URGENCY_CRITICAL",
    "URGENCY_HIGH",
    "URGENCY_LOW",
    "URGENCY_MEDIUM",
    "calculate_urgency",
    "create_default_decorator_chain",
    "create_minimal_decorator_chain",
    "infer_category",
]
