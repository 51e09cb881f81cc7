"""Use case for listing reports."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from cleancity.domain.entities import Report, ReportFilters
from cleancity.infrastructure.repositories import ReportRepository


def list_reports(session: Session, filters: ReportFilters | None = None) -> Sequence[Report]:
    """Return reports matching ``filters``, newest first by default."""

    return ReportRepository(session).list(filters)
