"""ORM models used by the application infrastructure."""

from .catalog import CategoryModel, StatusModel
from .post import PostCommentModel, PostModel, PostRatingModel
from .profile import ProfileModel
from .report import CommentModel, ReportModel

__all__ = [
    "CategoryModel",
    "CommentModel",
    "PostCommentModel",
    "PostModel",
    "PostRatingModel",
    "ProfileModel",
    "ReportModel",
    "StatusModel",
]
