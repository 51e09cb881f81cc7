"""Tests wiring notification events to the dispatcher."""

from __future__ import annotations

from cleancity.application.events import EventBus
from cleancity.application.use_cases.notifications import register_notification_handlers
from cleancity.domain.entities import (
    NotificationEvent,
    ReportAssigned,
    ReportCommented,
    ReportResolved,
    ReportStatusChanged,
    UserMentioned,
)


class RecordingDispatcher:
    def __init__(self) -> None:
        self.delivered = []

    def deliver(self, notification):
        self.delivered.append(notification)
        return None


def _register():
    bus = EventBus()
    dispatcher = RecordingDispatcher()
    subscriptions = register_notification_handlers(
        bus, dispatcher, base_url="https://cleancity.example"
    )
    return bus, dispatcher, subscriptions


def test_one_handler_per_notification_event() -> None:
    bus, _, subscriptions = _register()

    assert len(subscriptions) == len(NotificationEvent)
    assert sorted(bus.active_events()) == sorted(event.value for event in NotificationEvent)


def test_comment_event_is_delivered_to_the_owner_topic() -> None:
    bus, dispatcher, _ = _register()

    bus.emit(
        NotificationEvent.REPORT_COMMENTED,
        ReportCommented(
            report_id="r-1",
            report_owner_id="u-1",
            report_owner_username="Ana Horvat",
            commenter_id="u-2",
            commenter_name="marko",
            comment_preview="Seen it too",
            report_title="Pothole",
        ),
    )

    [notification] = dispatcher.delivered
    assert notification.topic == "pi-clean-city-ana-horvat"
    assert notification.message == 'marko commented: "Seen it too"'


def test_every_event_produces_one_notification() -> None:
    bus, dispatcher, _ = _register()

    bus.emit(
        NotificationEvent.REPORT_STATUS_CHANGED,
        ReportStatusChanged("r-1", "u-1", "ana", "New", "In Progress", "Pothole", "admin"),
    )
    bus.emit(
        NotificationEvent.REPORT_ASSIGNED,
        ReportAssigned("r-1", "w-1", "ivo", "Ivo", "Pothole", "Ilica 1", "admin"),
    )
    bus.emit(
        NotificationEvent.REPORT_RESOLVED,
        ReportResolved("r-1", "u-1", "ana", "Pothole", "admin"),
    )
    bus.emit(
        NotificationEvent.USER_MENTIONED,
        UserMentioned("u-3", "petra", "ana", "r-1", "@petra look"),
    )

    assert [n.topic for n in dispatcher.delivered] == [
        "pi-clean-city-ana",
        "pi-clean-city-ivo",
        "pi-clean-city-ana",
        "pi-clean-city-petra",
    ]
    assert [n.priority for n in dispatcher.delivered] == [4, 5, 4, 3]


def test_unsubscribing_stops_delivery() -> None:
    bus, dispatcher, subscriptions = _register()

    for subscription in subscriptions:
        subscription.unsubscribe()
    bus.emit(
        NotificationEvent.REPORT_RESOLVED,
        ReportResolved("r-1", "u-1", "ana", "Pothole", "admin"),
    )

    assert dispatcher.delivered == []
    assert bus.active_events() == []
