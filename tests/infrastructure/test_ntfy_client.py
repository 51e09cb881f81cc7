"""Tests for the ntfy client and the notification dispatcher."""

from __future__ import annotations

import json
import logging
from email.header import decode_header

import httpx
import pytest

from cleancity.domain.entities import NotificationAction, PushNotification
from cleancity.infrastructure.notifications import (
    NotificationDispatcher,
    NtfyClient,
    NtfyPublishError,
)


def _client(handler, **kwargs) -> NtfyClient:
    return NtfyClient(
        "https://ntfy.example/",
        http_client=httpx.Client(transport=httpx.MockTransport(handler)),
        **kwargs,
    )


def _notification() -> PushNotification:
    return PushNotification(
        topic="pi-clean-city-ana",
        title="New Comment 💬",
        message="hello",
        priority=3,
        tags=("speech_balloon",),
        actions=(NotificationAction(action="view", label="Open", url="https://x/r/1"),),
    )


def test_publish_posts_json_to_the_base_url() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"id": "abc"})

    _client(handler).publish(_notification())

    [request] = requests
    assert request.url.host == "ntfy.example"
    assert request.url.path == "/"
    assert request.headers["Content-Type"] == "application/json"
    assert "Authorization" not in request.headers
    assert json.loads(request.content) == {
        "topic": "pi-clean-city-ana",
        "message": "hello",
        "title": "New Comment 💬",
        "priority": 3,
        "tags": ["speech_balloon"],
        "actions": [{"action": "view", "label": "Open", "url": "https://x/r/1"}],
    }


def test_bearer_token_is_sent_when_configured() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers.get("Authorization"))
        return httpx.Response(200)

    _client(handler, auth_token="tk_secret").publish_simple("topic", "hi")

    assert seen == ["Bearer tk_secret"]


def test_publish_simple_sends_plain_text_to_topic_url() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200)

    _client(handler).publish_simple("pi-clean-city-ana", "Čisti grad")

    [request] = requests
    assert str(request.url) == "https://ntfy.example/pi-clean-city-ana"
    assert request.content.decode("utf-8") == "Čisti grad"


def test_publish_with_headers() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200)

    _client(handler).publish_with_headers(
        "topic",
        "body",
        title="Heads up",
        priority=5,
        tags=["warning", "skull"],
        click="https://cleancity.example",
        markdown=True,
    )

    headers = requests[0].headers
    assert headers["Title"] == "Heads up"
    assert headers["Priority"] == "5"
    assert headers["Tags"] == "warning,skull"
    assert headers["Click"] == "https://cleancity.example"
    assert headers["Markdown"] == "yes"


def test_publish_with_headers_encodes_non_ascii_values() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200)

    _client(handler).publish_with_headers(
        "topic", "body", title="Status ažuriran 📊", tags=["bar_chart", "📊"]
    )

    headers = requests[0].headers
    assert headers["Title"].startswith("=?utf-8?b?")
    [(raw, charset)] = decode_header(headers["Title"])
    assert raw.decode(charset) == "Status ažuriran 📊"
    [(raw, charset)] = decode_header(headers["Tags"])
    assert raw.decode(charset) == "bar_chart,📊"


def test_non_success_status_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, text="rate limited")

    with pytest.raises(NtfyPublishError) as excinfo:
        _client(handler).publish(_notification())

    assert excinfo.value.status_code == 429
    assert excinfo.value.body == "rate limited"


def test_dispatcher_reports_success() -> None:
    dispatcher = NotificationDispatcher(_client(lambda request: httpx.Response(200)))

    result = dispatcher.deliver(_notification())

    assert result.ok is True
    assert result.error is None


def test_dispatcher_turns_http_errors_into_results(caplog: pytest.LogCaptureFixture) -> None:
    dispatcher = NotificationDispatcher(_client(lambda request: httpx.Response(500)))

    with caplog.at_level(logging.ERROR):
        result = dispatcher.deliver(_notification())

    assert result.ok is False
    assert result.error.status_code == 500
    assert "status 500" in caplog.text


def test_dispatcher_turns_transport_errors_into_results() -> None:
    calls: list[int] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(1)
        raise httpx.ConnectError("connection refused", request=request)

    result = NotificationDispatcher(_client(handler)).deliver(_notification())

    assert result.ok is False
    assert result.error.status_code is None
    assert "connection refused" in result.error.message
    assert calls == [1]


def test_dispatcher_never_raises(caplog: pytest.LogCaptureFixture) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise RuntimeError("relay exploded")

    with caplog.at_level(logging.ERROR):
        result = NotificationDispatcher(_client(handler)).deliver(_notification())

    assert result.ok is False
    assert result.error.message == "relay exploded"
    assert "Unexpected error sending notification to topic pi-clean-city-ana" in caplog.text


def test_disabled_dispatcher_skips_delivery() -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200)

    result = NotificationDispatcher(_client(handler), enabled=False).deliver(_notification())

    assert result.ok is True
    assert result.skipped is True
    assert calls == []
