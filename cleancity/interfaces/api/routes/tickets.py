"""Administration routes for triaging reports."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from cleancity.application.badges import (
    PRIORITY_OPTIONS,
    create_assignment_badge,
    create_category_badge,
    create_priority_badge,
    create_status_badge,
)
from cleancity.application.events import EventBus
from cleancity.application.services import TicketChanges, TicketService
from cleancity.application.use_cases import RepositoryError
from cleancity.application.use_cases.reports import list_reports as list_reports_uc
from cleancity.application.use_cases.tickets import (
    list_city_services as list_city_services_uc,
    list_statuses as list_statuses_uc,
    update_ticket as update_ticket_uc,
)
from cleancity.domain.entities import Profile, Report, ReportFilters
from cleancity.infrastructure.database import get_db
from cleancity.interfaces.api.dependencies import (
    get_event_bus,
    get_ticket_service,
    require_admin,
)
from cleancity.interfaces.api.routes_helpers import to_http_exception
from cleancity.interfaces.api.schemas import (
    BadgeRead,
    PriorityOptionRead,
    ProfileSummary,
    ReportRead,
    StatusRead,
    TicketBadges,
    TicketRead,
    TicketUpdate,
)

router = APIRouter(prefix="/admin", tags=["admin"])


def _ticket_to_read_model(report: Report) -> TicketRead:
    badges = TicketBadges(
        status=BadgeRead.model_validate(create_status_badge(report.status).render()),
        priority=BadgeRead.model_validate(create_priority_badge(report.priority).render()),
        assignment=BadgeRead.model_validate(
            create_assignment_badge(report.assigned_worker).render()
        ),
        category=BadgeRead.model_validate(
            create_category_badge(report.category.name if report.category else None).render()
        ),
    )
    data = ReportRead.model_validate(report).model_dump()
    return TicketRead(**data, badges=badges)


@router.get("/tickets", response_model=list[TicketRead])
def list_tickets(
    status_id: int | None = Query(default=None),
    category_id: int | None = Query(default=None),
    priority: str | None = Query(default=None),
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
    _: Profile = Depends(require_admin),
) -> list[TicketRead]:
    filters = ReportFilters(
        status_id=status_id,
        category_id=category_id,
        priority=priority,
        limit=limit,
        offset=offset,
    )
    return [_ticket_to_read_model(report) for report in list_reports_uc(db, filters)]


@router.patch("/tickets/{ticket_id}", response_model=TicketRead)
def update_ticket(
    ticket_id: str,
    payload: TicketUpdate,
    db: Session = Depends(get_db),
    bus: EventBus = Depends(get_event_bus),
    service: TicketService = Depends(get_ticket_service),
    current_profile: Profile = Depends(require_admin),
) -> TicketRead:
    """Change status, priority or assignment of a report."""

    changes = TicketChanges(
        status_id=payload.status_id,
        priority=payload.priority,
        assigned_worker_id=payload.assigned_worker_id,
        clear_assignment=payload.unassign,
    )
    try:
        report = update_ticket_uc(
            db,
            bus,
            ticket_id=ticket_id,
            changes=changes,
            changed_by=current_profile,
            service=service,
        )
    except (ValueError, RepositoryError) as exc:
        raise to_http_exception(exc) from exc
    return _ticket_to_read_model(report)


@router.get("/city-services", response_model=list[ProfileSummary])
def list_city_services(
    service: TicketService = Depends(get_ticket_service),
    db: Session = Depends(get_db),
    _: Profile = Depends(require_admin),
) -> list[ProfileSummary]:
    return [
        ProfileSummary.model_validate(profile)
        for profile in list_city_services_uc(db, service)
    ]


@router.get("/statuses", response_model=list[StatusRead])
def list_statuses(
    service: TicketService = Depends(get_ticket_service),
    db: Session = Depends(get_db),
    _: Profile = Depends(require_admin),
) -> list[StatusRead]:
    return [StatusRead.model_validate(item) for item in list_statuses_uc(db, service)]


@router.get("/priorities", response_model=list[PriorityOptionRead])
def list_priorities(_: Profile = Depends(require_admin)) -> list[PriorityOptionRead]:
    return [PriorityOptionRead.model_validate(option) for option in PRIORITY_OPTIONS]
