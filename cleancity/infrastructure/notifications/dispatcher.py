"""Deliver push notifications without letting failures reach the caller."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from cleancity.domain.entities import PushNotification

from .ntfy import NtfyClient, NtfyPublishError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeliveryError:
    """Why a notification could not be delivered."""

    message: str
    status_code: int | None = None


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome of a delivery attempt; callers are free to ignore it."""

    ok: bool
    skipped: bool = False
    error: DeliveryError | None = None

    @classmethod
    def success(cls) -> "DeliveryResult":
        return cls(ok=True)

    @classmethod
    def skip(cls) -> "DeliveryResult":
        return cls(ok=True, skipped=True)

    @classmethod
    def failure(cls, message: str, status_code: int | None = None) -> "DeliveryResult":
        return cls(ok=False, error=DeliveryError(message=message, status_code=status_code))


class NotificationDispatcher:
    """Hand notifications to the relay client. Failures are logged, never retried."""

    def __init__(self, client: NtfyClient, *, enabled: bool = True) -> None:
        self._client = client
        self.enabled = enabled

    def deliver(self, notification: PushNotification) -> DeliveryResult:
        if not self.enabled:
            logger.info(
                "Notifications disabled; skipping delivery to topic %s", notification.topic
            )
            return DeliveryResult.skip()

        try:
            self._client.publish(notification)
        except NtfyPublishError as exc:
            if exc.body:
                logger.error(
                    "Push relay responded with status %s for topic %s: %s",
                    exc.status_code,
                    notification.topic,
                    exc.body,
                )
            else:
                logger.error(
                    "Push relay responded with status %s for topic %s",
                    exc.status_code,
                    notification.topic,
                )
            return DeliveryResult.failure(str(exc), exc.status_code)
        except httpx.HTTPError as exc:
            logger.error(
                "Error sending notification to topic %s: %s", notification.topic, exc
            )
            return DeliveryResult.failure(str(exc))
        except Exception as exc:
            logger.exception(
                "Unexpected error sending notification to topic %s", notification.topic
            )
            return DeliveryResult.failure(str(exc) or exc.__class__.__name__)

        logger.debug("Delivered notification to topic %s", notification.topic)
        return DeliveryResult.success()

    def close(self) -> None:
        self._client.close()


__all__ = ["DeliveryError", "DeliveryResult", "NotificationDispatcher"]
