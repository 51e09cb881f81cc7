"""Domain entity representing a user profile."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

ROLE_CITIZEN = "citizen"
ROLE_CITY_SERVICE = "cityservice"
ROLE_ADMIN = "admin"


@dataclass
class Profile:
    """Public profile attached to an authenticated account."""

    id: str
    username: str | None
    email: str | None
    role: str = ROLE_CITIZEN
    avatar_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def has_role(self, role: str) -> bool:
        """Return ``True`` when the profile role matches ``role``."""

        return (self.role or "").lower() == role.lower()

    def is_admin(self) -> bool:
        """Return ``True`` when the profile belongs to an administrator."""

        return self.has_role(ROLE_ADMIN)

    def display_name(self) -> str:
        """Return the name shown to other users."""

        return self.username or self.email or "Unknown"


__all__ = ["Profile", "ROLE_ADMIN", "ROLE_CITIZEN", "ROLE_CITY_SERVICE"]
