"""End-to-end tests of the HTTP API with a fake push relay."""

from __future__ import annotations

import json

import httpx
import pytest
from fastapi.testclient import TestClient
from jose import jwt

from cleancity.domain.entities import Profile
from cleancity.infrastructure.notifications import NotificationDispatcher, NtfyClient
from cleancity.infrastructure.repositories import CatalogRepository, ProfileRepository
from main import create_app


def _token(profile_id: str) -> dict[str, str]:
    token = jwt.encode(
        {"sub": profile_id, "aud": "authenticated"}, "test-secret", algorithm="HS256"
    )
    return {"Authorization": f"Bearer {token}"}


class FakeRelay:
    """Record every publish request and answer with ``status_code``."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json={"id": "msg"})

    def payloads(self) -> list[dict]:
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture()
def relay() -> FakeRelay:
    return FakeRelay()


@pytest.fixture()
def client(db_session, relay):
    profiles = ProfileRepository(db_session)
    profiles.create(Profile(id="u-ana", username="Ana", email="ana@example.com"))
    profiles.create(Profile(id="u-marko", username="marko", email=None))
    profiles.create(Profile(id="u-admin", username="admin", email=None, role="admin"))
    profiles.create(Profile(id="u-ivo", username="ivo", email=None, role="cityservice"))
    profiles.create(Profile(id="u-anon", username=None, email="anon@example.com"))

    ntfy = NtfyClient(
        "https://ntfy.example", http_client=httpx.Client(transport=httpx.MockTransport(relay))
    )
    app = create_app(dispatcher=NotificationDispatcher(ntfy))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def category_id(db_session) -> int:
    return CatalogRepository(db_session).list_categories()[0].id


def _create_report(client: TestClient, category_id: int) -> dict:
    response = client.post(
        "/reports",
        json={
            "title": "Illegal dumping",
            "description": "Someone left old furniture next to the river bank.",
            "category_id": category_id,
            "latitude": 45.8,
            "longitude": 15.97,
            "address": "Savska cesta 5",
        },
        headers=_token("u-ana"),
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_catalogues_are_public(client: TestClient) -> None:
    statuses = client.get("/statuses").json()
    categories = client.get("/categories").json()

    assert [item["name"] for item in statuses] == ["New", "In Progress", "Resolved", "Closed"]
    assert len(categories) == 6


def test_authentication_is_required(client: TestClient, category_id: int) -> None:
    missing = client.post("/reports", json={"title": "x"})
    invalid = client.post("/reports", json={"title": "x"}, headers={"Authorization": "Bearer nope"})
    unknown = client.post("/reports", json={"title": "x"}, headers=_token("u-ghost"))

    assert missing.status_code == 401
    assert invalid.json()["detail"] == "Invalid credentials"
    assert unknown.json()["detail"] == "Profile not found"


def test_invalid_report_returns_field_errors(client: TestClient, category_id: int) -> None:
    response = client.post(
        "/reports",
        json={"title": "Pothole", "description": "too short", "category_id": category_id},
        headers=_token("u-ana"),
    )

    assert response.status_code == 422
    assert set(response.json()["detail"]["errors"]) == {"description", "location"}


def test_comment_from_another_user_reaches_the_owner(
    client: TestClient, relay: FakeRelay, category_id: int
) -> None:
    report = _create_report(client, category_id)

    response = client.post(
        f"/reports/{report['id']}/comments",
        json={"content": "Saw it too, it is blocking the path"},
        headers=_token("u-marko"),
    )

    assert response.status_code == 201
    [payload] = relay.payloads()
    assert payload["topic"] == "pi-clean-city-ana"
    assert payload["title"] == "New Comment 💬"
    assert payload["click"] == f"https://cleancity.example/reports/{report['id']}"
    comments = client.get(f"/reports/{report['id']}/comments").json()
    assert [comment["user"]["username"] for comment in comments] == ["marko"]


def test_admin_routes_require_admin(client: TestClient) -> None:
    assert client.get("/admin/tickets", headers=_token("u-ana")).status_code == 403
    assert client.get("/admin/tickets").status_code == 401


def test_admin_resolves_and_assigns_ticket(
    client: TestClient, relay: FakeRelay, category_id: int
) -> None:
    report = _create_report(client, category_id)
    statuses = {item["name"]: item["id"] for item in client.get("/statuses").json()}
    workers = client.get("/admin/city-services", headers=_token("u-admin")).json()

    response = client.patch(
        f"/admin/tickets/{report['id']}",
        json={"status_id": statuses["Resolved"], "assigned_worker_id": workers[0]["id"]},
        headers=_token("u-admin"),
    )

    assert response.status_code == 200, response.text
    ticket = response.json()
    assert ticket["status"]["name"] == "Resolved"
    assert ticket["resolved_at"] is not None
    assert ticket["assigned_worker"]["username"] == "ivo"
    assert set(ticket["badges"]) == {"status", "priority", "assignment", "category"}
    assert [(p["topic"], p["title"]) for p in relay.payloads()] == [
        ("pi-clean-city-ana", "Report Status Updated 📊"),
        ("pi-clean-city-ana", "Report Resolved ✅"),
        ("pi-clean-city-ivo", "New Assignment 📋"),
    ]


def test_ticket_update_errors(client: TestClient, category_id: int) -> None:
    report = _create_report(client, category_id)

    empty = client.patch(f"/admin/tickets/{report['id']}", json={}, headers=_token("u-admin"))
    missing = client.patch(
        "/admin/tickets/nope", json={"priority": "high"}, headers=_token("u-admin")
    )
    priorities = client.get("/admin/priorities", headers=_token("u-admin")).json()

    assert empty.status_code == 400
    assert missing.status_code == 404
    assert [option["value"] for option in priorities] == ["low", "medium", "high", "critical"]


def test_feed_lists_new_posts_with_badges(client: TestClient) -> None:
    created = client.post(
        "/posts/",
        json={"title": "Spring clean-up", "content": "Meet at the main square at nine."},
        headers=_token("u-ana"),
    )
    rated = client.put(
        f"/posts/{created.json()['id']}/rating", json={"rating": 5}, headers=_token("u-marko")
    )
    feed = client.get("/posts/", params={"style": "compact"}).json()

    assert created.status_code == 201
    assert rated.json()["average_rating"] == 5.0
    [entry] = feed
    assert entry["author_name"] == "Ana"
    assert [badge["type"] for badge in entry["badges"]] == ["new", "popular", "trending"]
    assert entry["is_highlighted"] is True


def test_feed_ordering_and_highlight_filter(client: TestClient) -> None:
    ids = []
    for title in ("Community garden", "Bike repair workshop"):
        response = client.post(
            "/posts/",
            json={"title": title, "content": "Everyone is welcome to join us."},
            headers=_token("u-ana"),
        )
        ids.append(response.json()["id"])
    garden, workshop = ids
    client.put(f"/posts/{garden}/rating", json={"rating": 5}, headers=_token("u-marko"))

    by_priority = client.get("/posts/").json()
    newest_first = client.get("/posts/", params={"sort_by_priority": "false"}).json()
    highlighted = client.get("/posts/", params={"only_highlighted": "true"}).json()

    assert [entry["id"] for entry in by_priority] == [garden, workshop]
    assert [entry["id"] for entry in newest_first] == [workshop, garden]
    assert [entry["id"] for entry in highlighted] == [garden]


def test_only_the_author_can_delete_a_post(client: TestClient) -> None:
    post = client.post(
        "/posts/",
        json={"title": "Lost cat", "content": "Grey cat last seen near the library."},
        headers=_token("u-ana"),
    ).json()

    forbidden = client.delete(f"/posts/{post['id']}", headers=_token("u-marko"))
    deleted = client.delete(f"/posts/{post['id']}", headers=_token("u-ana"))

    assert forbidden.status_code == 403
    assert deleted.status_code == 204
    assert client.get(f"/posts/{post['id']}").status_code == 404


def test_notification_topic_and_test_message(client: TestClient, relay: FakeRelay) -> None:
    topic = client.get("/notifications/topic", headers=_token("u-ana")).json()
    delivered = client.post("/notifications/test", headers=_token("u-ana")).json()

    assert topic == {
        "topic": "pi-clean-city-ana",
        "subscribe_url": "https://ntfy.example/pi-clean-city-ana",
    }
    assert delivered["ok"] is True
    assert relay.payloads()[0]["topic"] == "pi-clean-city-ana"


def test_failed_delivery_is_reported(client: TestClient, relay: FakeRelay) -> None:
    relay.status_code = 500

    delivered = client.post("/notifications/test", headers=_token("u-ana")).json()

    assert delivered["ok"] is False
    assert delivered["status_code"] == 500


def test_topic_requires_a_username(client: TestClient) -> None:
    response = client.get("/notifications/topic", headers=_token("u-anon"))

    assert response.status_code == 400
