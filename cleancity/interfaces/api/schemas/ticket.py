"""Schemas for the administration ticket endpoints."""

from pydantic import BaseModel, ConfigDict

from .report import ReportRead


class TicketUpdate(BaseModel):
    status_id: int | None = None
    priority: str | None = None
    assigned_worker_id: str | None = None
    unassign: bool = False

    model_config = ConfigDict(extra="forbid")


class BadgeRead(BaseModel):
    label: str
    variant: str
    class_name: str | None = None

    model_config = ConfigDict(from_attributes=True)


class TicketBadges(BaseModel):
    status: BadgeRead
    priority: BadgeRead
    assignment: BadgeRead
    category: BadgeRead


class TicketRead(ReportRead):
    """Report as shown in the administration table, with its badges."""

    badges: TicketBadges


class PriorityOptionRead(BaseModel):
    value: str
    label: str

    model_config = ConfigDict(from_attributes=True)
