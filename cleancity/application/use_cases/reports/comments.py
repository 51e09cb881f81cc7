"""Use cases for report comments."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cleancity.application.events import EventBus
from cleancity.application.use_cases.errors import RepositoryError
from cleancity.domain.entities import (
    NotificationEvent,
    Profile,
    Report,
    ReportComment,
    ReportCommented,
    UserMentioned,
)
from cleancity.infrastructure.repositories import ProfileRepository, ReportRepository
from cleancity.utils import Clock, utc_now

from .mentions import extract_mentions

logger = logging.getLogger(__name__)


def list_comments(session: Session, report_id: str) -> Sequence[ReportComment]:
    repository = ReportRepository(session)
    if repository.get(report_id) is None:
        raise ValueError("Report not found")
    return repository.list_comments(report_id)


def add_comment(
    session: Session,
    bus: EventBus,
    *,
    report_id: str,
    content: str,
    author: Profile,
    clock: Clock = utc_now,
) -> ReportComment:
    """Store a comment and tell the report owner and mentioned users about it."""

    text = (content or "").strip()
    if not text:
        raise ValueError("Comment content is required")

    repository = ReportRepository(session)
    report = repository.get(report_id)
    if report is None:
        raise ValueError("Report not found")

    try:
        comment = repository.add_comment(
            ReportComment(
                id=None,
                report_id=report_id,
                content=text,
                user_id=author.id,
                created_at=clock(),
            )
        )
    except SQLAlchemyError as exc:
        session.rollback()
        raise RepositoryError(f"Failed to add comment: {exc}") from exc

    _notify_owner(bus, report, author, text)
    _notify_mentioned(session, bus, report, author, text)
    return comment


def _notify_owner(bus: EventBus, report: Report, author: Profile, text: str) -> None:
    owner = report.user
    if owner is None or owner.id == author.id:
        return
    if not owner.username:
        logger.debug("Owner of report %s has no username; skipping notification", report.id)
        return
    bus.emit(
        NotificationEvent.REPORT_COMMENTED,
        ReportCommented(
            report_id=report.id,
            report_owner_id=owner.id,
            report_owner_username=owner.username,
            commenter_id=author.id,
            commenter_name=author.display_name(),
            comment_preview=text,
            report_title=report.title,
        ),
    )


def _notify_mentioned(
    session: Session, bus: EventBus, report: Report, author: Profile, text: str
) -> None:
    usernames = extract_mentions(text)
    if not usernames:
        return
    for profile in ProfileRepository(session).list_by_usernames(usernames):
        if profile.id == author.id:
            continue
        bus.emit(
            NotificationEvent.USER_MENTIONED,
            UserMentioned(
                mentioned_user_id=profile.id,
                mentioned_username=profile.username,
                mentioner_name=author.display_name(),
                report_id=report.id,
                context=text,
            ),
        )


__all__ = ["add_comment", "list_comments"]
