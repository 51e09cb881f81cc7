"""Use cases for citizen reports."""

from .comments import add_comment, list_comments
from .create_report import create_report
from .get_report import get_report
from .list_reports import list_reports
from .mentions import extract_mentions

__all__ = [
    "add_comment",
    "create_report",
    "extract_mentions",
    "get_report",
    "list_comments",
    "list_reports",
]
