"""Tests for the push notification builders."""

from __future__ import annotations

import pytest

from cleancity.application.use_cases.notifications import (
    create_assignment_notification,
    create_comment_notification,
    create_mention_notification,
    create_resolution_notification,
    create_status_update_notification,
    create_test_notification,
    truncate_preview,
)
from cleancity.domain.entities import PushNotification

BASE_URL = "https://cleancity.example/"


def test_truncate_preview() -> None:
    assert truncate_preview("short") == "short"
    assert truncate_preview("x" * 50) == "x" * 50
    assert truncate_preview("x" * 51) == "x" * 50 + "..."


def test_comment_notification() -> None:
    notification = create_comment_notification(
        topic="pi-clean-city-ana",
        report_id="r-1",
        commenter_name="Marko",
        comment_preview="y" * 80,
        report_title="Pothole",
        base_url=BASE_URL,
    )

    assert notification.priority == 3
    assert notification.message == f'Marko commented: "{"y" * 50}..."'
    assert notification.click == "https://cleancity.example/reports/r-1"
    assert [action.label for action in notification.actions] == ["View Report", "Reply"]
    assert notification.actions[1].url == "https://cleancity.example/reports/r-1#comments"


@pytest.mark.parametrize(
    "status, tags, icon",
    [
        ("Resolved", ("white_check_mark", "🟢"), "✅"),
        ("In Progress", ("construction", "🔵"), "🚧"),
        ("New", ("hourglass", "🟡"), "⏳"),
        ("Closed", ("lock", "⚫"), "🔒"),
        ("Escalated", ("info", "⚪"), "ℹ️"),
    ],
)
def test_status_update_notification(status, tags, icon) -> None:
    notification = create_status_update_notification(
        topic="t",
        report_id="r-2",
        old_status="New",
        new_status=status,
        report_title="Broken light",
        base_url=BASE_URL,
    )

    assert notification.priority == 4
    assert notification.message == f"Status changed: New → {status}"
    assert notification.tags == tags
    assert notification.icon == icon


def test_assignment_notification_links_to_map() -> None:
    notification = create_assignment_notification(
        topic="t",
        report_id="r-3",
        assignee_name="Ivo",
        report_title="Graffiti",
        report_location="Ilica 1",
        base_url=BASE_URL,
    )

    assert notification.priority == 5
    assert notification.message == "Assigned to Ivo: Graffiti"
    assert notification.actions[1].url == "https://cleancity.example/map?report=r-3"


def test_resolution_and_mention_notifications() -> None:
    resolved = create_resolution_notification(
        topic="t", report_id="r-4", report_title="Bins", resolved_by="Admin", base_url=BASE_URL
    )
    mention = create_mention_notification(
        topic="t", report_id="r-4", mentioner_name="Ana", context="z" * 70, base_url=BASE_URL
    )

    assert resolved.priority == 4
    assert resolved.message == 'Your report "Bins" has been resolved by Admin'
    assert mention.priority == 3
    assert mention.message == f'Ana mentioned you: "{"z" * 50}..."'


def test_test_notification() -> None:
    notification = create_test_notification(topic="pi-clean-city-ana")

    assert notification.title == "Test obavijest 🎉"
    assert notification.priority == 3


def test_payload_omits_unset_fields() -> None:
    payload = create_test_notification(topic="t").to_payload()

    assert payload == {
        "topic": "t",
        "message": "Uspješno si postavio/la NTFY obavijesti za Pi Clean City!",
        "title": "Test obavijest 🎉",
        "priority": 3,
        "tags": ["white_check_mark", "✅"],
    }


@pytest.mark.parametrize("priority", [0, 6])
def test_priority_outside_scale_is_rejected(priority: int) -> None:
    with pytest.raises(ValueError):
        PushNotification(topic="t", message="m", priority=priority)


def test_payload_keys_cannot_be_overridden() -> None:
    with pytest.raises(TypeError):
        PushNotification(topic="t", message="m", extra={"topic": "other"})

    payload = PushNotification(topic="t", message="m", icon="https://x/i.png").to_payload()

    assert payload == {"topic": "t", "message": "m", "icon": "https://x/i.png"}
