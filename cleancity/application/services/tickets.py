"""Ticket service used by the administration workflow.

:class:`SqlTicketService` talks to the database. :class:`LoggingTicketService`
wraps any other service and logs every call with its duration, so logging
can be switched on without touching the wrapped implementation.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Protocol

from sqlalchemy.orm import Session

from cleancity.domain.entities import ROLE_CITY_SERVICE, Profile, Report, ReportStatus
from cleancity.infrastructure.repositories import (
    CatalogRepository,
    ProfileRepository,
    ReportRepository,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TicketChanges:
    """Fields an administrator can change on a ticket.

    ``None`` leaves a field untouched; the ``clear_*`` flags empty a field.
    ``resolved_at`` is stamped by the workflow, not by the client.
    """

    status_id: int | None = None
    priority: str | None = None
    assigned_worker_id: str | None = None
    clear_assignment: bool = False
    resolved_at: datetime | None = None
    clear_resolved_at: bool = False

    def is_empty(self) -> bool:
        return (
            self.status_id is None
            and self.priority is None
            and self.assigned_worker_id is None
            and not self.clear_assignment
        )

    def describe(self) -> dict[str, object]:
        described: dict[str, object] = {}
        if self.status_id is not None:
            described["status_id"] = self.status_id
        if self.priority is not None:
            described["priority"] = self.priority
        if self.assigned_worker_id is not None:
            described["assigned_worker_id"] = self.assigned_worker_id
        if self.clear_assignment:
            described["assigned_worker_id"] = None
        if self.resolved_at is not None:
            described["resolved_at"] = self.resolved_at.isoformat()
        if self.clear_resolved_at:
            described["resolved_at"] = None
        return described

    def apply_to(self, report: Report) -> Report:
        updated = report
        if self.status_id is not None:
            updated = replace(updated, status_id=self.status_id)
        if self.priority is not None:
            updated = replace(updated, priority=self.priority)
        if self.clear_assignment:
            updated = replace(updated, assigned_worker_id=None)
        elif self.assigned_worker_id is not None:
            updated = replace(updated, assigned_worker_id=self.assigned_worker_id)
        if self.clear_resolved_at:
            updated = replace(updated, resolved_at=None)
        elif self.resolved_at is not None:
            updated = replace(updated, resolved_at=self.resolved_at)
        return updated


class TicketService(Protocol):
    def update_ticket(self, ticket_id: str, changes: TicketChanges) -> Report: ...

    def get_city_services(self) -> Sequence[Profile]: ...

    def get_statuses(self) -> Sequence[ReportStatus]: ...


class SqlTicketService:
    """Ticket operations backed by the SQLAlchemy repositories."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def update_ticket(self, ticket_id: str, changes: TicketChanges) -> Report:
        repository = ReportRepository(self.session)
        current = repository.get(ticket_id)
        if current is None:
            raise ValueError("Report not found")
        return repository.update(changes.apply_to(current))

    def get_city_services(self) -> Sequence[Profile]:
        return ProfileRepository(self.session).list_by_role(ROLE_CITY_SERVICE)

    def get_statuses(self) -> Sequence[ReportStatus]:
        return CatalogRepository(self.session).list_statuses()


class LoggingTicketService:
    """Log each call made to ``service`` together with how long it took."""

    def __init__(self, service: TicketService) -> None:
        self.service = service

    def update_ticket(self, ticket_id: str, changes: TicketChanges) -> Report:
        logger.info("Updating ticket %s with changes %s", ticket_id, changes.describe())
        started = time.perf_counter()
        try:
            result = self.service.update_ticket(ticket_id, changes)
        except Exception:
            logger.exception(
                "Failed to update ticket %s after %.1fms", ticket_id, _elapsed_ms(started)
            )
            raise
        logger.info(
            "Ticket %s updated successfully in %.1fms", ticket_id, _elapsed_ms(started)
        )
        return result

    def get_city_services(self) -> Sequence[Profile]:
        logger.info("Fetching city services")
        started = time.perf_counter()
        try:
            result = self.service.get_city_services()
        except Exception:
            logger.exception(
                "Failed to fetch city services after %.1fms", _elapsed_ms(started)
            )
            raise
        logger.info(
            "Fetched %d city services in %.1fms", len(result), _elapsed_ms(started)
        )
        return result

    def get_statuses(self) -> Sequence[ReportStatus]:
        logger.info("Fetching statuses")
        started = time.perf_counter()
        try:
            result = self.service.get_statuses()
        except Exception:
            logger.exception("Failed to fetch statuses after %.1fms", _elapsed_ms(started))
            raise
        logger.info("Fetched %d statuses in %.1fms", len(result), _elapsed_ms(started))
        return result


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000


__all__ = [
    "LoggingTicketService",
    "SqlTicketService",
    "TicketChanges",
    "TicketService",
]
