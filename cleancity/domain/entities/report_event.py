"""Domain events raised while a report moves through its lifecycle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NotificationEvent(str, Enum):
    """Event types that can result in a push notification."""

    REPORT_COMMENTED = "report:commented"
    REPORT_STATUS_CHANGED = "report:status_changed"
    REPORT_ASSIGNED = "report:assigned"
    REPORT_RESOLVED = "report:resolved"
    USER_MENTIONED = "user:mentioned"


@dataclass(frozen=True)
class ReportCommented:
    report_id: str
    report_owner_id: str
    report_owner_username: str
    commenter_id: str
    commenter_name: str
    comment_preview: str
    report_title: str


@dataclass(frozen=True)
class ReportStatusChanged:
    report_id: str
    report_owner_id: str
    report_owner_username: str
    old_status: str
    new_status: str
    report_title: str
    changed_by: str


@dataclass(frozen=True)
class ReportAssigned:
    report_id: str
    assignee_id: str
    assignee_username: str
    assignee_name: str
    report_title: str
    report_location: str
    assigned_by: str


@dataclass(frozen=True)
class ReportResolved:
    report_id: str
    report_owner_id: str
    report_owner_username: str
    report_title: str
    resolved_by: str


@dataclass(frozen=True)
class UserMentioned:
    mentioned_user_id: str
    mentioned_username: str
    mentioner_name: str
    report_id: str
    context: str


__all__ = [
    "NotificationEvent",
    "ReportAssigned",
    "ReportCommented",
    "ReportResolved",
    "ReportStatusChanged",
    "UserMentioned",
]
