"""Badge factory and badge variant configuration."""

from .config import (
    PRIORITY_BADGE_CONFIG,
    PRIORITY_OPTIONS,
    STATUS_BADGE_CONFIG,
    get_priority_badge_variant,
    get_priority_label,
    get_status_badge_variant,
    is_valid_priority,
)
from .factory import (
    BadgeComponent,
    create_assignment_badge,
    create_category_badge,
    create_priority_badge,
    create_status_badge,
)

__all__ = [
    "BadgeComponent",
    "PRIORITY_BADGE_CONFIG",
    "PRIORITY_OPTIONS",
    "STATUS_BADGE_CONFIG",
    "create_assignment_badge",
    "create_category_badge",
    "create_priority_badge",
    "create_status_badge",
    "get_priority_badge_variant",
    "get_priority_label",
    "get_status_badge_variant",
    "is_valid_priority",
]
