"""Tests for report form validation."""

from __future__ import annotations

from cleancity.application.validation import validate_report_form
from cleancity.domain.entities import GeoPoint, ReportForm

VALID_DESCRIPTION = "Large pothole next to the tram stop on Ilica."


def _form(**overrides) -> ReportForm:
    data = {
        "title": "Pothole",
        "description": VALID_DESCRIPTION,
        "category_id": 1,
        "location": GeoPoint(latitude=45.81, longitude=15.98),
    }
    data.update(overrides)
    return ReportForm(**data)


def test_valid_form() -> None:
    result = validate_report_form(_form())

    assert result.is_valid is True
    assert result.errors == {}


def test_every_field_is_reported() -> None:
    result = validate_report_form(
        ReportForm(title="", description="", category_id=None, location=None)
    )

    assert result.is_valid is False
    assert result.errors == {
        "title": "Title is required",
        "description": "Description is required",
        "category": "Category is required",
        "location": "Location is required",
    }


def test_length_limits() -> None:
    too_long = validate_report_form(_form(title="x" * 101, description="y" * 501))
    too_short = validate_report_form(_form(description="too short"))

    assert too_long.errors == {
        "title": "Title must be 100 characters or less",
        "description": "Description must be 500 characters or less",
    }
    assert too_short.errors == {"description": "Description must be at least 20 characters"}
