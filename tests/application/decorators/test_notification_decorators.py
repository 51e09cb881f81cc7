"""Tests for the staged notification decorator chain."""

from __future__ import annotations

from datetime import timedelta

import pytest

from cleancity.application.decorators.notifications import (
    CategoryIconDecorator,
    NotificationDecoratorChain,
    PriorityNotificationDecorator,
    TimestampNotificationDecorator,
    calculate_urgency,
    create_default_decorator_chain,
    create_minimal_decorator_chain,
    infer_category,
)
from cleancity.domain.entities import PushNotification


@pytest.mark.parametrize(
    "priority, urgency",
    [(5, "critical"), (4, "high"), (3, "medium"), (2, "low"), (1, "low")],
)
def test_calculate_urgency(priority: int, urgency: str) -> None:
    assert calculate_urgency(priority) == urgency


@pytest.mark.parametrize(
    "title, message, category",
    [
        ("New Comment 💬", 'Ana commented: "hi"', "comment"),
        ("Report Status Updated 📊", "Status changed: New → Resolved", "status_update"),
        ("Update", "Your report status is In Progress", "status_update"),
        ("New Assignment 📋", "Assigned to Marko: Pothole", "assignment"),
        ("Done", "Your report has been resolved", "resolution"),
        ("Hello", "You were mentioned by Ana", "mention"),
        ("Hello", "Nothing matches here", "comment"),
    ],
)
def test_infer_category_uses_first_matching_rule(title, message, category) -> None:
    notification = PushNotification(topic="t", title=title, message=message)

    assert infer_category(notification) == category


def test_base_stage_defaults_priority_and_badges(now, clock) -> None:
    decorated = PriorityNotificationDecorator(clock=clock).decorate(
        PushNotification(topic="t", message="plain")
    )

    assert decorated.decorations.priority == 3
    assert decorated.decorations.urgency_level == "medium"
    assert decorated.decorations.badges == ("🟡", "MEDIUM")
    assert decorated.decorations.is_read is False
    assert decorated.decorations.timestamp == now


def test_default_chain_adds_time_and_icon(clock) -> None:
    chain = create_default_decorator_chain(clock=clock)

    decorated = chain.decorate(
        PushNotification(topic="t", title="New Assignment", message="Assigned to you", priority=5)
    )

    assert decorated.decorations.urgency_level == "critical"
    assert decorated.decorations.badges == ("🔴", "URGENT")
    assert decorated.decorations.category == "assignment"
    assert decorated.decorations.category_icon == "📋"
    assert decorated.decorations.time_ago == "upravo sada"


def test_timestamp_label_tracks_the_clock(now) -> None:
    current = {"value": now}
    chain = NotificationDecoratorChain(
        base=PriorityNotificationDecorator(clock=lambda: now)
    ).add_decorator(TimestampNotificationDecorator(clock=lambda: current["value"]))

    current["value"] = now + timedelta(hours=3)
    decorated = chain.decorate(PushNotification(topic="t", message="x"))

    assert decorated.decorations.time_ago == "prije 3 h"


def test_enrichers_keep_the_original_notification(clock) -> None:
    notification = PushNotification(topic="t", message="a comment")
    chain = create_minimal_decorator_chain(clock=clock).add_decorator(CategoryIconDecorator())

    decorated = chain.decorate(notification)

    assert decorated.notification is notification
    assert decorated.decorations.category_icon == "💬"
    assert decorated.decorations.time_ago is None


def test_decorate_many(clock) -> None:
    chain = create_default_decorator_chain(clock=clock)
    notifications = [
        PushNotification(topic="t", message="one", priority=1),
        PushNotification(topic="t", message="two", priority=4),
    ]

    results = chain.decorate_many(notifications)

    assert [item.decorations.urgency_level for item in results] == ["low", "high"]
