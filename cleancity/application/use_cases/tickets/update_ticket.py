"""Use case for triaging a report from the administration panel."""

from __future__ import annotations

import logging
from dataclasses import replace

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cleancity.application.events import EventBus
from cleancity.application.services import SqlTicketService, TicketChanges, TicketService
from cleancity.application.use_cases.errors import RepositoryError
from cleancity.domain.entities import (
    REPORT_PRIORITIES,
    ROLE_CITY_SERVICE,
    NotificationEvent,
    Profile,
    Report,
    ReportAssigned,
    ReportResolved,
    ReportStatusChanged,
)
from cleancity.infrastructure.repositories import (
    CatalogRepository,
    ProfileRepository,
    ReportRepository,
)
from cleancity.utils import Clock, utc_now

logger = logging.getLogger(__name__)


def update_ticket(
    session: Session,
    bus: EventBus,
    *,
    ticket_id: str,
    changes: TicketChanges,
    changed_by: Profile,
    service: TicketService | None = None,
    clock: Clock = utc_now,
) -> Report:
    """Apply ``changes`` to a report and emit the matching notification events."""

    if changes.is_empty():
        raise ValueError("No changes supplied")

    current = ReportRepository(session).get(ticket_id)
    if current is None:
        raise ValueError("Report not found")

    catalog = CatalogRepository(session)
    new_status = None
    if changes.status_id is not None and changes.status_id != current.status_id:
        new_status = catalog.get_status(changes.status_id)
        if new_status is None:
            raise ValueError("Status not found")
    if changes.priority is not None and changes.priority not in REPORT_PRIORITIES:
        raise ValueError(f"Unknown priority: {changes.priority}")

    assignee = None
    if (
        changes.assigned_worker_id is not None
        and changes.assigned_worker_id != current.assigned_worker_id
    ):
        assignee = ProfileRepository(session).get(changes.assigned_worker_id)
        if assignee is None:
            raise ValueError("Assigned worker not found")
        if not assignee.has_role(ROLE_CITY_SERVICE):
            raise ValueError("Tickets can only be assigned to city services")

    if new_status is not None:
        if new_status.is_resolved():
            changes = replace(changes, resolved_at=clock())
        elif current.resolved_at is not None:
            changes = replace(changes, clear_resolved_at=True)

    service = service or SqlTicketService(session)
    try:
        updated = service.update_ticket(ticket_id, changes)
    except SQLAlchemyError as exc:
        session.rollback()
        raise RepositoryError(f"Failed to update ticket: {exc}") from exc

    actor = changed_by.display_name()
    if new_status is not None:
        _emit_status_events(bus, updated, current, new_status.name, actor)
    if assignee is not None:
        _emit_assignment(bus, updated, assignee, actor)
    return updated


def _emit_status_events(
    bus: EventBus, report: Report, previous: Report, new_status: str, actor: str
) -> None:
    owner = report.user
    if owner is None or not owner.username:
        logger.debug("Report %s has no owner username; skipping status events", report.id)
        return
    old_status = previous.status.name if previous.status else "Unknown"
    bus.emit(
        NotificationEvent.REPORT_STATUS_CHANGED,
        ReportStatusChanged(
            report_id=report.id,
            report_owner_id=owner.id,
            report_owner_username=owner.username,
            old_status=old_status,
            new_status=new_status,
            report_title=report.title,
            changed_by=actor,
        ),
    )
    if report.status is not None and report.status.is_resolved():
        bus.emit(
            NotificationEvent.REPORT_RESOLVED,
            ReportResolved(
                report_id=report.id,
                report_owner_id=owner.id,
                report_owner_username=owner.username,
                report_title=report.title,
                resolved_by=actor,
            ),
        )


def _emit_assignment(bus: EventBus, report: Report, assignee: Profile, actor: str) -> None:
    if not assignee.username:
        logger.debug("Assignee %s has no username; skipping assignment event", assignee.id)
        return
    bus.emit(
        NotificationEvent.REPORT_ASSIGNED,
        ReportAssigned(
            report_id=report.id,
            assignee_id=assignee.id,
            assignee_username=assignee.username,
            assignee_name=assignee.display_name(),
            report_title=report.title,
            report_location=report.location_label(),
            assigned_by=actor,
        ),
    )
