"""Helpers deriving relay topics from usernames."""

from __future__ import annotations

import re

TOPIC_PREFIX = "pi-clean-city"

_WHITESPACE = re.compile(r"\s+")
_UNSAFE_CHARACTERS = re.compile(r"[^a-z0-9\-_.]")


def get_user_topic(username: str | None, prefix: str = TOPIC_PREFIX) -> str:
    """Return the topic a user subscribes to in the relay app.

    The name is lower-cased, whitespace runs become a single ``-`` and any
    character outside ``[a-z0-9._-]`` (emoji included) is dropped.
    """

    safe_name = _WHITESPACE.sub("-", (username or "").lower())
    safe_name = _UNSAFE_CHARACTERS.sub("", safe_name)
    return f"{prefix}-{safe_name}"


__all__ = ["TOPIC_PREFIX", "get_user_topic"]
