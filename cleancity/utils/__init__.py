"""Utility helpers for reusable functionality."""

from .datetime import (
    Clock,
    ensure_app_timezone,
    ensure_utc,
    get_app_timezone,
    hours_between,
    relative_time_label,
    seconds_between,
    to_naive_utc,
    utc_now,
)

__all__ = [
    "Clock",
    "ensure_app_timezone",
    "ensure_utc",
    "get_app_timezone",
    "hours_between",
    "relative_time_label",
    "seconds_between",
    "to_naive_utc",
    "utc_now",
]
