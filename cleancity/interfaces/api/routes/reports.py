"""Routes for submitting and browsing citizen reports."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from cleancity.application.events import EventBus
from cleancity.application.use_cases import RepositoryError
from cleancity.application.use_cases.reports import (
    add_comment as add_comment_uc,
    create_report as create_report_uc,
    get_report as get_report_uc,
    list_comments as list_comments_uc,
    list_reports as list_reports_uc,
)
from cleancity.domain.entities import GeoPoint, Profile, ReportFilters, ReportForm
from cleancity.infrastructure.database import get_db
from cleancity.infrastructure.repositories import CatalogRepository
from cleancity.interfaces.api.dependencies import get_current_profile, get_event_bus
from cleancity.interfaces.api.routes_helpers import to_http_exception
from cleancity.interfaces.api.schemas import (
    CategoryRead,
    CommentCreate,
    CommentRead,
    ReportCreate,
    ReportRead,
    StatusRead,
)

router = APIRouter(tags=["reports"])


@router.get("/categories", response_model=list[CategoryRead])
def list_categories(db: Session = Depends(get_db)) -> list[CategoryRead]:
    return [
        CategoryRead.model_validate(category)
        for category in CatalogRepository(db).list_categories()
    ]


@router.get("/statuses", response_model=list[StatusRead])
def list_statuses(db: Session = Depends(get_db)) -> list[StatusRead]:
    return [
        StatusRead.model_validate(item) for item in CatalogRepository(db).list_statuses()
    ]


@router.get("/reports", response_model=list[ReportRead])
def list_reports(
    status_id: int | None = Query(default=None),
    category_id: int | None = Query(default=None),
    user_id: str | None = Query(default=None),
    priority: str | None = Query(default=None),
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    order_by: str = Query(default="created_at"),
    order_direction: str = Query(default="desc", pattern="^(asc|desc)$"),
    db: Session = Depends(get_db),
) -> list[ReportRead]:
    filters = ReportFilters(
        status_id=status_id,
        category_id=category_id,
        user_id=user_id,
        priority=priority,
        limit=limit,
        offset=offset,
        order_by=order_by,
        order_direction=order_direction,
    )
    return [ReportRead.model_validate(report) for report in list_reports_uc(db, filters)]


@router.post("/reports", response_model=ReportRead, status_code=status.HTTP_201_CREATED)
def create_report(
    payload: ReportCreate,
    db: Session = Depends(get_db),
    current_profile: Profile = Depends(get_current_profile),
) -> ReportRead:
    """Submit a new report on behalf of the authenticated citizen."""

    location = None
    if payload.latitude is not None and payload.longitude is not None:
        location = GeoPoint(latitude=payload.latitude, longitude=payload.longitude)
    form = ReportForm(
        title=payload.title,
        description=payload.description,
        category_id=payload.category_id,
        location=location,
        address=payload.address,
    )
    try:
        report = create_report_uc(
            db, form=form, user_id=current_profile.id, priority=payload.priority
        )
    except (ValueError, RepositoryError) as exc:
        raise to_http_exception(exc) from exc
    return ReportRead.model_validate(report)


@router.get("/reports/{report_id}", response_model=ReportRead)
def get_report(report_id: str, db: Session = Depends(get_db)) -> ReportRead:
    try:
        report = get_report_uc(db, report_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return ReportRead.model_validate(report)


@router.get("/reports/{report_id}/comments", response_model=list[CommentRead])
def list_comments(report_id: str, db: Session = Depends(get_db)) -> list[CommentRead]:
    try:
        comments = list_comments_uc(db, report_id)
    except ValueError as exc:
        raise to_http_exception(exc) from exc
    return [CommentRead.model_validate(comment) for comment in comments]


@router.post(
    "/reports/{report_id}/comments",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
)
def add_comment(
    report_id: str,
    payload: CommentCreate,
    db: Session = Depends(get_db),
    bus: EventBus = Depends(get_event_bus),
    current_profile: Profile = Depends(get_current_profile),
) -> CommentRead:
    """Comment on a report. The owner and any @mentioned users are notified."""

    try:
        comment = add_comment_uc(
            db, bus, report_id=report_id, content=payload.content, author=current_profile
        )
    except (ValueError, RepositoryError) as exc:
        raise to_http_exception(exc) from exc
    return CommentRead.model_validate(comment)
