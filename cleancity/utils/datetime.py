"""Helpers for working with timezone-aware datetimes."""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from cleancity.config import get_settings

Clock = Callable[[], datetime]

_DEFAULT_TIMEZONE: Final[str] = "Europe/Zagreb"
_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the configured application timezone.

    The timezone is resolved from the ``APP_TIMEZONE`` setting. Values such as
    ``UTC+02:00`` are accepted as fixed offsets; anything unresolvable falls
    back to ``Europe/Zagreb``.
    """

    settings = get_settings()
    tz_name = (settings.app_timezone or "").strip() or _DEFAULT_TIMEZONE
    return _resolve_timezone(tz_name)


def utc_now() -> datetime:
    """Return the current aware UTC time. Default clock for time-based rules."""

    return datetime.now(tz=timezone.utc)


def ensure_utc(value: datetime | None) -> datetime | None:
    """Normalize ``value`` to an aware UTC datetime; naive values are taken as UTC."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_naive_utc(value: datetime | None) -> datetime | None:
    """Return ``value`` as a naive UTC datetime, the form stored in the database."""

    aware = ensure_utc(value)
    return aware.replace(tzinfo=None) if aware else None


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Normalize ``value`` so it is expressed in the configured timezone."""

    if value is None:
        return None

    tz = get_app_timezone()
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc).astimezone(tz)
    return value.astimezone(tz)


def hours_between(earlier: datetime, later: datetime) -> float:
    """Return the number of hours elapsed from ``earlier`` to ``later``."""

    delta = ensure_utc(later) - ensure_utc(earlier)
    return delta.total_seconds() / 3600


def seconds_between(earlier: datetime, later: datetime) -> int:
    """Return whole seconds elapsed from ``earlier`` to ``later`` (floored)."""

    delta = ensure_utc(later) - ensure_utc(earlier)
    return int(delta.total_seconds() // 1)


def relative_time_label(seconds: int) -> str:
    """Return the Croatian "time ago" label used across the client."""

    if seconds < 60:
        return "upravo sada"
    if seconds < 3600:
        return f"prije {seconds // 60} min"
    if seconds < 86400:
        return f"prije {seconds // 3600} h"
    return f"prije {seconds // 86400} dana"


def _resolve_timezone(tz_name: str) -> tzinfo:
    """Resolve ``tz_name`` into a ``timezone`` instance."""

    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        match = _OFFSET_PATTERN.match(tz_name)
        if match:
            sign = -1 if match.group("sign") == "-" else 1
            hours = int(match.group("hours"))
            minutes = int(match.group("minutes") or 0)
            offset = timedelta(hours=hours, minutes=minutes)
            return timezone(sign * offset)
    return ZoneInfo(_DEFAULT_TIMEZONE)
