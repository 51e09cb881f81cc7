"""Value objects produced and consumed by validation rules."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PostDraft:
    """Title and content of a post before it is stored."""

    title: str
    content: str


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of running one or more validation rules."""

    is_valid: bool
    errors: tuple[str, ...] = ()

    @classmethod
    def from_errors(cls, errors: list[str] | tuple[str, ...]) -> "ValidationResult":
        return cls(is_valid=not errors, errors=tuple(errors))


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class ReportForm:
    """Data a citizen enters when submitting a report."""

    title: str
    description: str
    category_id: int | None
    location: GeoPoint | None
    address: str | None = None


@dataclass(frozen=True)
class ReportFormValidation:
    """Per-field validation errors for a :class:`ReportForm`."""

    is_valid: bool
    errors: dict[str, str] = field(default_factory=dict)


__all__ = [
    "GeoPoint",
    "PostDraft",
    "ReportForm",
    "ReportFormValidation",
    "ValidationResult",
]
