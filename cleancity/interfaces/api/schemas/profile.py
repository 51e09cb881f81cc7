"""Schemas describing profiles embedded in other responses."""

from pydantic import BaseModel, ConfigDict


class ProfileSummary(BaseModel):
    id: str
    username: str | None = None
    avatar_url: str | None = None
    role: str

    model_config = ConfigDict(from_attributes=True)
