"""Use case for submitting a citizen report."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cleancity.application.use_cases.errors import InvalidReportError, RepositoryError
from cleancity.application.validation import validate_report_form
from cleancity.domain.entities import (
    DEFAULT_REPORT_PRIORITY,
    REPORT_PRIORITIES,
    STATUS_NEW,
    Report,
    ReportForm,
)
from cleancity.infrastructure.repositories import CatalogRepository, ReportRepository
from cleancity.utils import Clock, utc_now

logger = logging.getLogger(__name__)


def create_report(
    session: Session,
    *,
    form: ReportForm,
    user_id: str | None,
    priority: str = DEFAULT_REPORT_PRIORITY,
    clock: Clock = utc_now,
) -> Report:
    """Validate ``form`` and store it as a new report in the "New" status."""

    validation = validate_report_form(form)
    if not validation.is_valid:
        raise InvalidReportError(validation.errors)
    if priority not in REPORT_PRIORITIES:
        raise InvalidReportError({"priority": f"Unknown priority: {priority}"})

    catalog = CatalogRepository(session)
    if catalog.get_category(form.category_id) is None:
        raise InvalidReportError({"category": "Category does not exist"})
    status = catalog.get_status_by_name(STATUS_NEW)
    if status is None:
        raise RepositoryError(f'Failed to create report: status "{STATUS_NEW}" is missing')

    report = Report(
        id=None,
        title=form.title.strip(),
        description=form.description.strip(),
        latitude=form.location.latitude,
        longitude=form.location.longitude,
        category_id=form.category_id,
        status_id=status.id,
        priority=priority,
        address=form.address,
        user_id=user_id,
        created_at=clock(),
    )
    try:
        created = ReportRepository(session).create(report)
    except SQLAlchemyError as exc:
        session.rollback()
        raise RepositoryError(f"Failed to create report: {exc}") from exc

    logger.info("Report %s created by %s", created.id, user_id)
    return created
