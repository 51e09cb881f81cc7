"""Domain entities exposed by the application."""

from .badge import (
    BADGE_NEW,
    BADGE_PINNED,
    BADGE_POPULAR,
    BADGE_TRENDING,
    BADGE_VERIFIED,
    POST_BADGE_TYPES,
    PostBadge,
    RenderedBadge,
)
from .notification import (
    MAX_PRIORITY,
    MIN_PRIORITY,
    NOTIFICATION_ASSIGNMENT,
    NOTIFICATION_COMMENT,
    NOTIFICATION_MENTION,
    NOTIFICATION_RESOLUTION,
    NOTIFICATION_STATUS_UPDATE,
    NOTIFICATION_TYPES,
    NotificationAction,
    PushNotification,
)
from .post import Post, PostComment
from .post_event import (
    PostCommented,
    PostCreated,
    PostDeleted,
    PostEvent,
    PostRated,
    PostUpdated,
    PostViewed,
)
from .profile import ROLE_ADMIN, ROLE_CITIZEN, ROLE_CITY_SERVICE, Profile
from .report import (
    DEFAULT_REPORT_PRIORITY,
    REPORT_PRIORITIES,
    STATUS_CLOSED,
    STATUS_IN_PROGRESS,
    STATUS_NEW,
    STATUS_RESOLVED,
    Category,
    Report,
    ReportComment,
    ReportFilters,
    ReportStatus,
)
from .report_event import (
    NotificationEvent,
    ReportAssigned,
    ReportCommented,
    ReportResolved,
    ReportStatusChanged,
    UserMentioned,
)
from .validation import (
    GeoPoint,
    PostDraft,
    ReportForm,
    ReportFormValidation,
    ValidationResult,
)

__all__ = [
    "BADGE_NEW",
    "BADGE_PINNED",
    "BADGE_POPULAR",
    "BADGE_TRENDING",
    "BADGE_VERIFIED",
    "POST_BADGE_TYPES",
    "PostBadge",
    "RenderedBadge",
    "MAX_PRIORITY",
    "MIN_PRIORITY",
    "NOTIFICATION_ASSIGNMENT",
    "NOTIFICATION_COMMENT",
    "NOTIFICATION_MENTION",
    "NOTIFICATION_RESOLUTION",
    "NOTIFICATION_STATUS_UPDATE",
    "NOTIFICATION_TYPES",
    "NotificationAction",
    "PushNotification",
    "Post",
    "PostComment",
    "PostCommented",
    "PostCreated",
    "PostDeleted",
    "PostEvent",
    "PostRated",
    "PostUpdated",
    "PostViewed",
    "Profile",
    "ROLE_ADMIN",
    "ROLE_CITIZEN",
    "ROLE_CITY_SERVICE",
    "Category",
    "DEFAULT_REPORT_PRIORITY",
    "REPORT_PRIORITIES",
    "Report",
    "ReportComment",
    "ReportFilters",
    "ReportStatus",
    "STATUS_CLOSED",
    "STATUS_IN_PROGRESS",
    "STATUS_NEW",
    "STATUS_RESOLVED",
    "NotificationEvent",
    "ReportAssigned",
    "ReportCommented",
    "ReportResolved",
    "ReportStatusChanged",
    "UserMentioned",
    "GeoPoint",
    "PostDraft",
    "ReportForm",
    "ReportFormValidation",
    "ValidationResult",
]
