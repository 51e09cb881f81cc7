"""Endpoints for push notification setup."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from cleancity.application.use_cases.notifications import (
    get_user_topic,
    send_test_notification,
)
from cleancity.config import Settings, get_settings
from cleancity.domain.entities import Profile
from cleancity.infrastructure.notifications import NotificationDispatcher
from cleancity.interfaces.api.dependencies import get_current_profile, get_dispatcher
from cleancity.interfaces.api.schemas import DeliveryRead, TopicRead

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _require_username(profile: Profile) -> str:
    if not profile.username:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Set a username before subscribing to notifications",
        )
    return profile.username


@router.get("/topic", response_model=TopicRead)
def get_topic(
    current_profile: Profile = Depends(get_current_profile),
    settings: Settings = Depends(get_settings),
) -> TopicRead:
    """Return the ntfy topic the authenticated user should subscribe to."""

    topic = get_user_topic(_require_username(current_profile), settings.ntfy_topic_prefix)
    return TopicRead(
        topic=topic, subscribe_url=f"{settings.ntfy_base_url.rstrip('/')}/{topic}"
    )


@router.post("/test", response_model=DeliveryRead)
def send_test(
    current_profile: Profile = Depends(get_current_profile),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
    settings: Settings = Depends(get_settings),
) -> DeliveryRead:
    """Send the authenticated user a test notification."""

    _require_username(current_profile)
    result = send_test_notification(
        current_profile, dispatcher, topic_prefix=settings.ntfy_topic_prefix
    )
    return DeliveryRead(
        ok=result.ok,
        skipped=result.skipped,
        error=result.error.message if result.error else None,
        status_code=result.error.status_code if result.error else None,
    )
