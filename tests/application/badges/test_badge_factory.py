"""Tests for the admin badge factory."""

from __future__ import annotations

import pytest

from cleancity.application.badges import (
    STATUS_BADGE_CONFIG,
    create_assignment_badge,
    create_category_badge,
    create_priority_badge,
    create_status_badge,
    get_priority_badge_variant,
    get_priority_label,
    get_status_badge_variant,
    is_valid_priority,
)
from cleancity.domain.entities import Profile, ReportStatus


def test_null_inputs_never_raise() -> None:
    assert create_status_badge(None).get_label() == "Unknown"
    assert create_priority_badge(None).get_label() == "N/A"
    assert create_assignment_badge(None).get_label() == "Unassigned"
    assert create_category_badge(None).get_label() == "N/A"

    for badge in (
        create_status_badge(None),
        create_priority_badge(None),
        create_assignment_badge(None),
        create_category_badge(None),
    ):
        assert badge.render().label == badge.get_label()


@pytest.mark.parametrize(
    "name, variant",
    [
        ("New", "destructive"),
        (" in progress ", "default"),
        ("RESOLVED", "secondary"),
        ("Closed", "outline"),
        ("Escalated", "default"),
    ],
)
def test_status_variants_come_from_the_table(name: str, variant: str) -> None:
    status = ReportStatus(id=1, name=name, color="#000")

    assert create_status_badge(status).render().variant == variant
    assert get_status_badge_variant(name) == variant


@pytest.mark.parametrize(
    "priority, variant",
    [("critical", "destructive"), ("High", "destructive"), ("medium", "default"), ("low", "secondary"), ("odd", "secondary")],
)
def test_priority_variants(priority: str, variant: str) -> None:
    assert create_priority_badge(priority).render().variant == variant
    assert get_priority_badge_variant(priority) == variant


def test_assignment_badge_falls_back_to_email() -> None:
    worker = Profile(id="w-1", username=None, email="worker@city.hr")

    badge = create_assignment_badge(worker)

    assert badge.get_label() == "worker@city.hr"
    assert badge.render().variant == "secondary"


def test_unassigned_badge_is_muted() -> None:
    rendered = create_assignment_badge(None).render()

    assert rendered.variant == "outline"
    assert rendered.class_name == "text-muted-foreground"


def test_new_status_only_needs_a_table_entry(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(STATUS_BADGE_CONFIG, "escalated", "destructive")

    status = ReportStatus(id=9, name="Escalated", color="#f00")

    assert create_status_badge(status).render().variant == "destructive"


def test_priority_options() -> None:
    assert get_priority_label("critical") == "Critical"
    assert get_priority_label("unknown") == "unknown"
    assert is_valid_priority("high") is True
    assert is_valid_priority("urgent") is False
