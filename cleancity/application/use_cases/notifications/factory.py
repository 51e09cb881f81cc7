"""Builders for the push notifications sent on report activity."""

from __future__ import annotations

from cleancity.domain.entities import NotificationAction, PushNotification

COMMENT_PREVIEW_LENGTH = 50

_STATUS_METADATA: dict[str, tuple[str, str]] = {
    "pending": ("hourglass", "🟡"),
    "new": ("hourglass", "🟡"),
    "in_progress": ("construction", "🔵"),
    "in progress": ("construction", "🔵"),
    "resolved": ("white_check_mark", "🟢"),
    "closed": ("lock", "⚫"),
}
_DEFAULT_STATUS_METADATA = ("info", "⚪")

_STATUS_ICONS: dict[str, str] = {
    "pending": "⏳",
    "new": "⏳",
    "in_progress": "🚧",
    "in progress": "🚧",
    "resolved": "✅",
    "closed": "🔒",
}
_DEFAULT_STATUS_ICON = "ℹ️"


def truncate_preview(text: str, length: int = COMMENT_PREVIEW_LENGTH) -> str:
    """Cut ``text`` to ``length`` characters, adding an ellipsis when cut."""

    if len(text) <= length:
        return text
    return text[:length] + "..."


def _report_url(base_url: str, report_id: str, suffix: str = "") -> str:
    return f"{base_url.rstrip('/')}/reports/{report_id}{suffix}"


def create_comment_notification(
    *,
    topic: str,
    report_id: str,
    commenter_name: str,
    comment_preview: str,
    report_title: str,
    base_url: str,
) -> PushNotification:
    url = _report_url(base_url, report_id)
    return PushNotification(
        topic=topic,
        title="New Comment 💬",
        message=f'{commenter_name} commented: "{truncate_preview(comment_preview)}"',
        priority=3,
        tags=("speech_balloon", "💬"),
        click=url,
        actions=(
            NotificationAction(action="view", label="View Report", url=url),
            NotificationAction(
                action="view",
                label="Reply",
                url=_report_url(base_url, report_id, "#comments"),
            ),
        ),
    )


def create_status_update_notification(
    *,
    topic: str,
    report_id: str,
    old_status: str,
    new_status: str,
    report_title: str,
    base_url: str,
) -> PushNotification:
    key = new_status.lower()
    emoji, color = _STATUS_METADATA.get(key, _DEFAULT_STATUS_METADATA)
    return PushNotification(
        topic=topic,
        title="Report Status Updated 📊",
        message=f"Status changed: {old_status} → {new_status}",
        priority=4,
        tags=(emoji, color),
        click=_report_url(base_url, report_id),
        icon=_STATUS_ICONS.get(key, _DEFAULT_STATUS_ICON),
    )


def create_assignment_notification(
    *,
    topic: str,
    report_id: str,
    assignee_name: str,
    report_title: str,
    report_location: str,
    base_url: str,
) -> PushNotification:
    url = _report_url(base_url, report_id)
    return PushNotification(
        topic=topic,
        title="New Assignment 📋",
        message=f"Assigned to {assignee_name}: {report_title}",
        priority=5,
        tags=("person_raising_hand", "🔴"),
        click=url,
        actions=(
            NotificationAction(action="view", label="View Report", url=url),
            NotificationAction(
                action="view",
                label="View Map",
                url=f"{base_url.rstrip('/')}/map?report={report_id}",
            ),
        ),
    )


def create_resolution_notification(
    *,
    topic: str,
    report_id: str,
    report_title: str,
    resolved_by: str,
    base_url: str,
) -> PushNotification:
    return PushNotification(
        topic=topic,
        title="Report Resolved ✅",
        message=f'Your report "{report_title}" has been resolved by {resolved_by}',
        priority=4,
        tags=("white_check_mark", "🟢"),
        click=_report_url(base_url, report_id),
        icon="✅",
    )


def create_mention_notification(
    *,
    topic: str,
    report_id: str,
    mentioner_name: str,
    context: str,
    base_url: str,
) -> PushNotification:
    return PushNotification(
        topic=topic,
        title="You were mentioned 📢",
        message=f'{mentioner_name} mentioned you: "{truncate_preview(context)}"',
        priority=3,
        tags=("at", "📢"),
        click=_report_url(base_url, report_id),
    )


def create_test_notification(*, topic: str) -> PushNotification:
    """Notification users send themselves to check their relay setup."""

    return PushNotification(
        topic=topic,
        title="Test obavijest 🎉",
        message="Uspješno si postavio/la NTFY obavijesti za Pi Clean City!",
        priority=3,
        tags=("white_check_mark", "✅"),
    )


__all__ = [
    "COMMENT_PREVIEW_LENGTH",
    "create_assignment_notification",
    "create_comment_notification",
    "create_mention_notification",
    "create_resolution_notification",
    "create_status_update_notification",
    "create_test_notification",
    "truncate_preview",
]
