"""Schemas for report endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .profile import ProfileSummary


class CategoryRead(BaseModel):
    id: int
    name: str
    icon: str
    description: str | None = None

    model_config = ConfigDict(from_attributes=True)


class StatusRead(BaseModel):
    id: int
    name: str
    color: str
    description: str | None = None
    sort_order: int = 0

    model_config = ConfigDict(from_attributes=True)


class ReportCreate(BaseModel):
    """Payload a citizen submits for a new report."""

    title: str = ""
    description: str = ""
    category_id: int | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    address: str | None = Field(default=None, max_length=255)
    priority: str = "medium"


class ReportRead(BaseModel):
    id: str
    title: str
    description: str
    latitude: float
    longitude: float
    address: str | None = None
    priority: str
    category_id: int
    status_id: int
    user_id: str | None = None
    assigned_worker_id: str | None = None
    created_at: datetime | None = None
    resolved_at: datetime | None = None
    category: CategoryRead | None = None
    status: StatusRead | None = None
    user: ProfileSummary | None = None
    assigned_worker: ProfileSummary | None = None

    model_config = ConfigDict(from_attributes=True)


class CommentCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=2000)


class CommentRead(BaseModel):
    id: str
    report_id: str
    content: str
    user_id: str | None = None
    created_at: datetime | None = None
    user: ProfileSummary | None = None

    model_config = ConfigDict(from_attributes=True)
