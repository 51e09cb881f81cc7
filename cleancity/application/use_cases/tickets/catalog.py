"""Use cases listing the data the ticket editor offers."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from cleancity.application.services import SqlTicketService, TicketService
from cleancity.domain.entities import Profile, ReportStatus


def list_city_services(
    session: Session, service: TicketService | None = None
) -> Sequence[Profile]:
    return (service or SqlTicketService(session)).get_city_services()


def list_statuses(
    session: Session, service: TicketService | None = None
) -> Sequence[ReportStatus]:
    return (service or SqlTicketService(session)).get_statuses()
