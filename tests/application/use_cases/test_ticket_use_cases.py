"""Tests for the administration ticket workflow."""

from __future__ import annotations

import logging

import pytest

from cleancity.application.events import EventBus
from cleancity.application.services import (
    LoggingTicketService,
    SqlTicketService,
    TicketChanges,
)
from cleancity.application.use_cases.reports import create_report
from cleancity.application.use_cases.tickets import (
    list_city_services,
    list_statuses,
    update_ticket,
)
from cleancity.domain.entities import GeoPoint, NotificationEvent, Profile, ReportForm
from cleancity.infrastructure.repositories import CatalogRepository, ProfileRepository


@pytest.fixture()
def setup(db_session):
    profiles = ProfileRepository(db_session)
    owner = profiles.create(Profile(id="u-ana", username="ana", email=None))
    admin = profiles.create(Profile(id="u-admin", username="admin", email=None, role="admin"))
    worker = profiles.create(
        Profile(id="u-ivo", username="ivo", email=None, role="cityservice")
    )
    report = create_report(
        db_session,
        form=ReportForm(
            title="Broken street light",
            description="The light on the corner has been out for days.",
            category_id=CatalogRepository(db_session).list_categories()[0].id,
            location=GeoPoint(latitude=45.8, longitude=15.9),
            address="Ilica 10",
        ),
        user_id=owner.id,
    )
    bus = EventBus()
    events: list[tuple[str, object]] = []
    for event in NotificationEvent:
        bus.subscribe(event, lambda payload, name=event.value: events.append((name, payload)))
    return {
        "admin": admin,
        "worker": worker,
        "report": report,
        "bus": bus,
        "events": events,
    }


def _status_id(session, name: str) -> int:
    return CatalogRepository(session).get_status_by_name(name).id


def test_status_change_emits_status_event(db_session, setup) -> None:
    updated = update_ticket(
        db_session,
        setup["bus"],
        ticket_id=setup["report"].id,
        changes=TicketChanges(status_id=_status_id(db_session, "In Progress")),
        changed_by=setup["admin"],
    )

    assert updated.status.name == "In Progress"
    assert updated.resolved_at is None
    [(name, payload)] = setup["events"]
    assert name == "report:status_changed"
    assert (payload.old_status, payload.new_status) == ("New", "In Progress")
    assert payload.changed_by == "admin"


def test_resolving_stamps_time_and_emits_resolution(db_session, setup, now, clock) -> None:
    updated = update_ticket(
        db_session,
        setup["bus"],
        ticket_id=setup["report"].id,
        changes=TicketChanges(status_id=_status_id(db_session, "Resolved")),
        changed_by=setup["admin"],
        clock=clock,
    )

    assert updated.resolved_at == now.replace(tzinfo=None)
    assert [name for name, _ in setup["events"]] == [
        "report:status_changed",
        "report:resolved",
    ]


def test_reopening_clears_resolution_time(db_session, setup, clock) -> None:
    common = {"ticket_id": setup["report"].id, "changed_by": setup["admin"], "clock": clock}
    update_ticket(
        db_session,
        setup["bus"],
        changes=TicketChanges(status_id=_status_id(db_session, "Resolved")),
        **common,
    )
    reopened = update_ticket(
        db_session,
        setup["bus"],
        changes=TicketChanges(status_id=_status_id(db_session, "In Progress")),
        **common,
    )

    assert reopened.resolved_at is None


def test_assignment_emits_assigned_event(db_session, setup) -> None:
    updated = update_ticket(
        db_session,
        setup["bus"],
        ticket_id=setup["report"].id,
        changes=TicketChanges(assigned_worker_id="u-ivo", priority="high"),
        changed_by=setup["admin"],
    )

    assert updated.assigned_worker.username == "ivo"
    assert updated.priority == "high"
    [(name, payload)] = setup["events"]
    assert name == "report:assigned"
    assert payload.assignee_username == "ivo"
    assert payload.report_location == "Ilica 10"


def test_same_values_emit_nothing(db_session, setup) -> None:
    update_ticket(
        db_session,
        setup["bus"],
        ticket_id=setup["report"].id,
        changes=TicketChanges(status_id=setup["report"].status_id, priority="low"),
        changed_by=setup["admin"],
    )

    assert setup["events"] == []


@pytest.mark.parametrize(
    "changes, message",
    [
        (TicketChanges(), "No changes supplied"),
        (TicketChanges(status_id=999), "Status not found"),
        (TicketChanges(priority="urgent"), "Unknown priority"),
        (TicketChanges(assigned_worker_id="nobody"), "Assigned worker not found"),
        (TicketChanges(assigned_worker_id="u-ana"), "only be assigned to city services"),
        (TicketChanges(assigned_worker_id="u-admin"), "only be assigned to city services"),
    ],
)
def test_invalid_changes_are_rejected(db_session, setup, changes, message) -> None:
    with pytest.raises(ValueError, match=message):
        update_ticket(
            db_session,
            setup["bus"],
            ticket_id=setup["report"].id,
            changes=changes,
            changed_by=setup["admin"],
        )


def test_unassign(db_session, setup) -> None:
    common = {"ticket_id": setup["report"].id, "changed_by": setup["admin"]}
    update_ticket(
        db_session, setup["bus"], changes=TicketChanges(assigned_worker_id="u-ivo"), **common
    )
    updated = update_ticket(
        db_session, setup["bus"], changes=TicketChanges(clear_assignment=True), **common
    )

    assert updated.assigned_worker_id is None


def test_logging_service_logs_calls_with_duration(
    db_session, setup, caplog: pytest.LogCaptureFixture
) -> None:
    service = LoggingTicketService(SqlTicketService(db_session))

    with caplog.at_level(logging.INFO, logger="cleancity.application.services.tickets"):
        workers = list_city_services(db_session, service)
        statuses = list_statuses(db_session, service)
        update_ticket(
            db_session,
            setup["bus"],
            ticket_id=setup["report"].id,
            changes=TicketChanges(priority="low"),
            changed_by=setup["admin"],
            service=service,
        )

    assert [w.username for w in workers] == ["ivo"]
    assert len(statuses) == 4
    assert "Fetched 1 city services in" in caplog.text
    assert "Fetched 4 statuses in" in caplog.text
    assert f"Ticket {setup['report'].id} updated successfully in" in caplog.text


def test_logging_service_reraises_failures(caplog: pytest.LogCaptureFixture) -> None:
    class FailingService:
        def update_ticket(self, ticket_id, changes):
            raise RuntimeError("database down")

        def get_city_services(self):
            return []

        def get_statuses(self):
            return []

    service = LoggingTicketService(FailingService())

    with caplog.at_level(logging.ERROR), pytest.raises(RuntimeError):
        service.update_ticket("r-1", TicketChanges(priority="low"))

    assert "Failed to update ticket r-1 after" in caplog.text
