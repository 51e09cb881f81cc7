"""Badge variant tables for statuses and priorities.

Adding a status or priority means adding a row to the matching table;
the resolver functions stay untouched.
"""

from __future__ import annotations

from dataclasses import dataclass

VARIANT_DEFAULT = "default"
VARIANT_SECONDARY = "secondary"
VARIANT_DESTRUCTIVE = "destructive"
VARIANT_OUTLINE = "outline"

STATUS_BADGE_CONFIG: dict[str, str] = {
    "new": VARIANT_DESTRUCTIVE,
    "in progress": VARIANT_DEFAULT,
    "resolved": VARIANT_SECONDARY,
    "closed": VARIANT_OUTLINE,
}

PRIORITY_BADGE_CONFIG: dict[str, str] = {
    "critical": VARIANT_DESTRUCTIVE,
    "high": VARIANT_DESTRUCTIVE,
    "medium": VARIANT_DEFAULT,
    "low": VARIANT_SECONDARY,
}

DEFAULT_STATUS_VARIANT = VARIANT_DEFAULT
DEFAULT_PRIORITY_VARIANT = VARIANT_SECONDARY


@dataclass(frozen=True)
class PriorityOption:
    value: str
    label: str


PRIORITY_OPTIONS: tuple[PriorityOption, ...] = (
    PriorityOption("low", "Low"),
    PriorityOption("medium", "Medium"),
    PriorityOption("high", "High"),
    PriorityOption("critical", "Critical"),
)


def _normalize(name: str | None) -> str:
    return (name or "").lower().strip()


def get_status_badge_variant(status_name: str | None) -> str:
    if not status_name:
        return DEFAULT_STATUS_VARIANT
    return STATUS_BADGE_CONFIG.get(_normalize(status_name), DEFAULT_STATUS_VARIANT)


def get_priority_badge_variant(priority: str | None) -> str:
    if not priority:
        return DEFAULT_PRIORITY_VARIANT
    return PRIORITY_BADGE_CONFIG.get(_normalize(priority), DEFAULT_PRIORITY_VARIANT)


def get_priority_label(value: str) -> str:
    for option in PRIORITY_OPTIONS:
        if option.value == value:
            return option.label
    return value


def is_valid_priority(value: str) -> bool:
    return any(option.value == value for option in PRIORITY_OPTIONS)


__all__ = [
    "DEFAULT_PRIORITY_VARIANT",
    "DEFAULT_STATUS_VARIANT",
    "PRIORITY_BADGE_CONFIG",
    "PRIORITY_OPTIONS",
    "PriorityOption",
    "STATUS_BADGE_CONFIG",
    "VARIANT_DEFAULT",
    "VARIANT_DESTRUCTIVE",
    "VARIANT_OUTLINE",
    "VARIANT_SECONDARY",
    "get_priority_badge_variant",
    "get_priority_label",
    "get_status_badge_variant",
    "is_valid_priority",
]
