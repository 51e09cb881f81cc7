"""Errors raised by use cases."""

from __future__ import annotations


class RepositoryError(RuntimeError):
    """Storage failed while a use case was running."""


class InvalidReportError(ValueError):
    """The submitted report form failed validation."""

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__("Report form is invalid")
        self.errors = errors


class InvalidPostError(ValueError):
    """The submitted post failed validation."""

    def __init__(self, errors: tuple[str, ...]) -> None:
        super().__init__("; ".join(errors) or "Post is invalid")
        self.errors = errors


__all__ = ["InvalidPostError", "InvalidReportError", "RepositoryError"]
