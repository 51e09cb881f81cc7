"""Extraction of ``@username`` mentions from free text."""

from __future__ import annotations

import re

MENTION_PATTERN = re.compile(r"@([a-zA-Z0-9_-]+)")


def extract_mentions(text: str) -> list[str]:
    """Return the mentioned usernames in order of first appearance, without repeats."""

    seen: set[str] = set()
    usernames: list[str] = []
    for match in MENTION_PATTERN.finditer(text or ""):
        username = match.group(1)
        key = username.lower()
        if key in seen:
            continue
        seen.add(key)
        usernames.append(username)
    return usernames


__all__ = ["MENTION_PATTERN", "extract_mentions"]
