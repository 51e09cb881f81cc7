"""Domain entities describing citizen reports and their catalogues."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .profile import Profile

STATUS_NEW = "New"
STATUS_IN_PROGRESS = "In Progress"
STATUS_RESOLVED = "Resolved"
STATUS_CLOSED = "Closed"

REPORT_PRIORITIES = ("low", "medium", "high", "critical")
DEFAULT_REPORT_PRIORITY = "medium"


@dataclass
class Category:
    """Kind of municipal issue a report belongs to."""

    id: int | None
    name: str
    icon: str
    description: str | None = None


@dataclass
class ReportStatus:
    """Workflow state a report can be in."""

    id: int | None
    name: str
    color: str
    description: str | None = None
    sort_order: int = 0

    def is_resolved(self) -> bool:
        return self.name.strip().lower() == STATUS_RESOLVED.lower()


@dataclass
class Report:
    """Geolocated issue submitted by a citizen."""

    id: str | None
    title: str
    description: str
    latitude: float
    longitude: float
    category_id: int
    status_id: int
    priority: str = DEFAULT_REPORT_PRIORITY
    address: str | None = None
    user_id: str | None = None
    assigned_worker_id: str | None = None
    created_at: datetime | None = None
    resolved_at: datetime | None = None
    category: Category | None = None
    status: ReportStatus | None = None
    user: Profile | None = None
    assigned_worker: Profile | None = None

    def location_label(self) -> str:
        """Return the address, or the coordinates when no address was given."""

        if self.address:
            return self.address
        return f"{self.latitude:.5f}, {self.longitude:.5f}"


@dataclass
class ReportComment:
    """Comment left on a report."""

    id: str | None
    report_id: str
    content: str
    user_id: str | None = None
    created_at: datetime | None = None
    user: Profile | None = None


@dataclass
class ReportFilters:
    """Optional filters applied when listing reports."""

    status_id: int | None = None
    category_id: int | None = None
    user_id: str | None = None
    priority: str | None = None
    limit: int | None = None
    offset: int | None = None
    order_by: str = "created_at"
    order_direction: str = "desc"


__all__ = [
    "Category",
    "DEFAULT_REPORT_PRIORITY",
    "REPORT_PRIORITIES",
    "Report",
    "ReportComment",
    "ReportFilters",
    "ReportStatus",
    "STATUS_CLOSED",
    "STATUS_IN_PROGRESS",
    "STATUS_NEW",
    "STATUS_RESOLVED",
]
