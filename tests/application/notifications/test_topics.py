"""Tests for user topic derivation."""

from __future__ import annotations

import pytest

from cleancity.application.use_cases.notifications import get_user_topic


@pytest.mark.parametrize(
    "username, topic",
    [
        ("user123", "pi-clean-city-user123"),
        ("John Doe", "pi-clean-city-john-doe"),
        ("", "pi-clean-city-"),
        (None, "pi-clean-city-"),
        ("ana 🚀 kovač", "pi-clean-city-ana--kova"),
        ("  spaced\tout  ", "pi-clean-city--spaced-out-"),
        ("dot.ted_name-ok", "pi-clean-city-dot.ted_name-ok"),
    ],
)
def test_get_user_topic(username, topic) -> None:
    assert get_user_topic(username) == topic


def test_custom_prefix() -> None:
    assert get_user_topic("Ana", prefix="staging") == "staging-ana"
