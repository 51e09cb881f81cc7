"""Interchangeable formatters that turn posts into display-ready text.

Every formatter returns a :class:`FormattedPost` and never raises for a
missing author or timestamp, so any of them can replace another.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from cleancity.domain.entities import Post
from cleancity.utils import (
    Clock,
    ensure_app_timezone,
    relative_time_label,
    seconds_between,
    utc_now,
)

DEFAULT_AVATAR = "/default-avatar.jpg"

_MONTHS_GENITIVE = (
    "siječnja",
    "veljače",
    "ožujka",
    "travnja",
    "svibnja",
    "lipnja",
    "srpnja",
    "kolovoza",
    "rujna",
    "listopada",
    "studenoga",
    "prosinca",
)

FORMATTER_STANDARD = "standard"
FORMATTER_RELATIVE = "relative"
FORMATTER_COMPACT = "compact"


@dataclass(frozen=True)
class FormattedPost:
    id: int | None
    title: str
    content: str
    excerpt: str
    formatted_date: str
    author_name: str
    author_avatar: str


def _long_date(value: datetime) -> str:
    return f"{value.day}. {_MONTHS_GENITIVE[value.month - 1]} {value.year}."


def _numeric_date(value: datetime) -> str:
    return f"{value.day}. {value.month}. {value.year}."


class BasePostFormatter(ABC):
    """Shared behaviour for post formatters."""

    @abstractmethod
    def format_date(self, value: datetime | None) -> str:
        """Return ``value`` as display text."""

    @abstractmethod
    def format_post(self, post: Post) -> FormattedPost:
        """Return the display representation of ``post``."""

    def format_content(self, content: str, max_length: int | None = None) -> str:
        if max_length and len(content) > max_length:
            return content[:max_length] + "..."
        return content

    def _create_excerpt(self, content: str, max_length: int = 100) -> str:
        if len(content) <= max_length:
            return content
        return content[:max_length].strip() + "..."

    @staticmethod
    def _author_avatar(post: Post) -> str:
        if post.author and post.author.avatar_url:
            return post.author.avatar_url
        return DEFAULT_AVATAR

    @staticmethod
    def _author_username(post: Post) -> str | None:
        return post.author.username if post.author else None


class StandardPostFormatter(BasePostFormatter):
    def format_date(self, value: datetime | None) -> str:
        localized = ensure_app_timezone(value)
        return _long_date(localized) if localized else ""

    def format_post(self, post: Post) -> FormattedPost:
        return FormattedPost(
            id=post.id,
            title=post.title,
            content=self.format_content(post.content),
            excerpt=self._create_excerpt(post.content),
            formatted_date=self.format_date(post.created_at),
            author_name=self._author_username(post) or "Anonymous",
            author_avatar=self._author_avatar(post),
        )


class RelativeTimePostFormatter(BasePostFormatter):
    """Show "prije N h" style dates; older than a week falls back to the date."""

    def __init__(self, *, clock: Clock = utc_now) -> None:
        self._clock = clock

    def format_date(self, value: datetime | None) -> str:
        if value is None:
            return ""
        seconds = seconds_between(value, self._clock())
        if seconds < 604800:
            return relative_time_label(seconds)
        return _numeric_date(ensure_app_timezone(value))

    def format_post(self, post: Post) -> FormattedPost:
        return FormattedPost(
            id=post.id,
            title=post.title,
            content=self.format_content(post.content),
            excerpt=self._create_excerpt(post.content, 150),
            formatted_date=self.format_date(post.created_at),
            author_name=self._author_username(post) or "Anonimno",
            author_avatar=self._author_avatar(post),
        )


class CompactPostFormatter(BasePostFormatter):
    def format_date(self, value: datetime | None) -> str:
        localized = ensure_app_timezone(value)
        if localized is None:
            return ""
        return f"{localized.day:02d}. {localized.month:02d}."

    def format_content(self, content: str, max_length: int | None = 50) -> str:
        return self._create_excerpt(content, max_length or 50)

    def format_post(self, post: Post) -> FormattedPost:
        title = post.title if len(post.title) <= 30 else post.title[:30] + "..."
        username = self._author_username(post)
        return FormattedPost(
            id=post.id,
            title=title,
            content=self.format_content(post.content, 50),
            excerpt=self._create_excerpt(post.content, 50),
            formatted_date=self.format_date(post.created_at),
            author_name=username[:10] if username else "Anon",
            author_avatar=self._author_avatar(post),
        )


def create_formatter(kind: str = FORMATTER_STANDARD, *, clock: Clock = utc_now) -> BasePostFormatter:
    """Return the formatter registered under ``kind``; unknown kinds get the standard one."""

    if kind == FORMATTER_RELATIVE:
        return RelativeTimePostFormatter(clock=clock)
    if kind == FORMATTER_COMPACT:
        return CompactPostFormatter()
    return StandardPostFormatter()


__all__ = [
    "BasePostFormatter",
    "CompactPostFormatter",
    "FORMATTER_COMPACT",
    "FORMATTER_RELATIVE",
    "FORMATTER_STANDARD",
    "FormattedPost",
    "RelativeTimePostFormatter",
    "StandardPostFormatter",
    "create_formatter",
]
