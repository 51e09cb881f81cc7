"""Repositories mapping ORM models to domain entities."""

from .catalog_repository import CatalogRepository
from .post_repository import PostRepository
from .profile_repository import ProfileRepository
from .report_repository import ReportRepository

__all__ = [
    "CatalogRepository",
    "PostRepository",
    "ProfileRepository",
    "ReportRepository",
]
