"""HTTP client for the ntfy push relay."""

from __future__ import annotations

import logging
from email.header import Header
from typing import Any

import httpx

from cleancity.config import Settings
from cleancity.domain.entities import MAX_PRIORITY, MIN_PRIORITY, PushNotification

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://ntfy.sh"


def encode_header_value(value: str) -> str:
    """Return ``value`` as an RFC 2047 encoded word when it is not plain ASCII."""

    if value.isascii():
        return value
    return Header(value, "utf-8").encode(maxlinelen=0)


class NtfyPublishError(Exception):
    """Raised when the relay rejects a publish request."""

    def __init__(self, message: str, *, status_code: int | None = None, body: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class NtfyClient:
    """Publish messages to an ntfy server.

    Three publish styles are supported: a JSON body posted to the server
    root, a plain-text body posted to the topic URL, and a plain-text body
    with the metadata carried in headers.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        auth_token: str | None = None,
        timeout: float = 10.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._auth_token = auth_token
        self._client = http_client or httpx.Client(timeout=timeout)
        self._owns_client = http_client is None

    @classmethod
    def from_settings(cls, settings: Settings) -> "NtfyClient":
        return cls(
            settings.ntfy_base_url,
            auth_token=settings.ntfy_auth_token,
            timeout=settings.ntfy_timeout_seconds,
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def publish(self, notification: PushNotification) -> None:
        """Send ``notification`` as a JSON document."""

        headers = self._headers("application/json")
        response = self._client.post(
            self.base_url, headers=headers, json=notification.to_payload()
        )
        self._raise_for_status(response)

    def publish_simple(self, topic: str, message: str) -> None:
        """Send ``message`` as plain text to ``topic``."""

        response = self._client.post(
            f"{self.base_url}/{topic}",
            headers=self._headers("text/plain"),
            content=message.encode("utf-8"),
        )
        self._raise_for_status(response)

    def publish_with_headers(
        self,
        topic: str,
        message: str,
        *,
        title: str | None = None,
        priority: int | None = None,
        tags: list[str] | tuple[str, ...] | None = None,
        click: str | None = None,
        markdown: bool = False,
    ) -> None:
        """Send ``message`` as plain text with metadata in request headers."""

        headers = self._headers("text/plain")
        if title:
            headers["Title"] = encode_header_value(title)
        if priority:
            if not MIN_PRIORITY <= priority <= MAX_PRIORITY:
                raise ValueError(
                    f"Priority must be between {MIN_PRIORITY} and {MAX_PRIORITY}"
                )
            headers["Priority"] = str(priority)
        if tags:
            headers["Tags"] = encode_header_value(",".join(tags))
        if click:
            headers["Click"] = encode_header_value(click)
        if markdown:
            headers["Markdown"] = "yes"

        response = self._client.post(
            f"{self.base_url}/{topic}",
            headers=headers,
            content=message.encode("utf-8"),
        )
        self._raise_for_status(response)

    def _headers(self, content_type: str) -> dict[str, Any]:
        headers: dict[str, Any] = {"Content-Type": content_type}
        if self._auth_token:
            headers["Authorization"] = f"Bearer {self._auth_token}"
        return headers

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if response.is_success:
            return
        raise NtfyPublishError(
            f"Failed to publish: {response.reason_phrase or response.status_code}",
            status_code=response.status_code,
            body=response.text or None,
        )


__all__ = ["DEFAULT_BASE_URL", "NtfyClient", "NtfyPublishError", "encode_header_value"]
