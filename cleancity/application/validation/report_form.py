"""Validation of the report submission form."""

from __future__ import annotations

from cleancity.domain.entities import ReportForm, ReportFormValidation

TITLE_MAX_LENGTH = 100
DESCRIPTION_MIN_LENGTH = 20
DESCRIPTION_MAX_LENGTH = 500


def validate_report_form(data: ReportForm) -> ReportFormValidation:
    """Return the first problem found for each field of ``data``."""

    errors: dict[str, str] = {}

    title = data.title or ""
    if not title.strip():
        errors["title"] = "Title is required"
    elif len(title) > TITLE_MAX_LENGTH:
        errors["title"] = f"Title must be {TITLE_MAX_LENGTH} characters or less"

    description = data.description or ""
    if not description.strip():
        errors["description"] = "Description is required"
    elif len(description) < DESCRIPTION_MIN_LENGTH:
        errors["description"] = (
            f"Description must be at least {DESCRIPTION_MIN_LENGTH} characters"
        )
    elif len(description) > DESCRIPTION_MAX_LENGTH:
        errors["description"] = (
            f"Description must be {DESCRIPTION_MAX_LENGTH} characters or less"
        )

    if not data.category_id:
        errors["category"] = "Category is required"

    if data.location is None:
        errors["location"] = "Location is required"

    return ReportFormValidation(is_valid=not errors, errors=errors)


__all__ = ["validate_report_form"]
