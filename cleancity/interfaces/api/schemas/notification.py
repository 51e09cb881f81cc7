"""Schemas for push notification endpoints."""

from pydantic import BaseModel


class TopicRead(BaseModel):
    topic: str
    subscribe_url: str


class DeliveryRead(BaseModel):
    ok: bool
    skipped: bool = False
    error: str | None = None
    status_code: int | None = None
