"""Aggregate application use cases."""

from .errors import InvalidPostError, InvalidReportError, RepositoryError

__all__ = ["InvalidPostError", "InvalidReportError", "RepositoryError"]
