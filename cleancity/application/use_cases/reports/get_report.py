"""Use case for retrieving a single report."""

from sqlalchemy.orm import Session

from cleancity.domain.entities import Report
from cleancity.infrastructure.repositories import ReportRepository


def get_report(session: Session, report_id: str) -> Report:
    """Return the report identified by ``report_id``."""

    report = ReportRepository(session).get(report_id)
    if report is None:
        raise ValueError("Report not found")
    return report
