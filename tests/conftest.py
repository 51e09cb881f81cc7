"""Shared fixtures for the test-suite."""

from __future__ import annotations

import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest

TEST_DB_PATH = Path(tempfile.gettempdir()) / f"cleancity-test-{os.getpid()}.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["APP_BASE_URL"] = "https://cleancity.example"
os.environ["NTFY_BASE_URL"] = "https://ntfy.example"
os.environ["NOTIFICATIONS_ENABLED"] = "true"
os.environ["APP_TIMEZONE"] = "Europe/Zagreb"

from cleancity.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def now() -> datetime:
    return NOW


@pytest.fixture()
def clock():
    """Clock frozen at :data:`NOW`."""

    return lambda: NOW


@pytest.fixture()
def db_session():
    """Yield a session bound to a freshly created and seeded database."""

    from cleancity.infrastructure import database

    database.initialize_database()
    database.Base.metadata.drop_all(bind=database.engine)
    database.initialize_database()

    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


def pytest_sessionfinish(session, exitstatus):
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()
