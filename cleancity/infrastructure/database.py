"""Database configuration and session management."""

from __future__ import annotations

import logging
from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from cleancity.config import get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


settings = get_settings()

logger = logging.getLogger(__name__)

DEFAULT_STATUSES: tuple[tuple[str, str, str, int], ...] = (
    ("New", "#ef4444", "Report received and waiting for triage", 1),
    ("In Progress", "#3b82f6", "A city service is working on the report", 2),
    ("Resolved", "#22c55e", "The issue has been fixed", 3),
    ("Closed", "#6b7280", "The report was closed without further action", 4),
)

DEFAULT_CATEGORIES: tuple[tuple[str, str, str], ...] = (
    ("Otpad", "🗑️", "Illegal dumping and overflowing bins"),
    ("Ceste", "🛣️", "Potholes and damaged road surfaces"),
    ("Rasvjeta", "💡", "Broken or missing street lights"),
    ("Zelene površine", "🌳", "Parks, trees and public greenery"),
    ("Vandalizam", "🎨", "Graffiti and damaged public property"),
    ("Ostalo", "📌", "Anything that does not fit another category"),
)


def _engine_options(database_url: str) -> dict:
    if database_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


database_url = settings.database_url
engine = create_engine(database_url, **_engine_options(database_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def seed_reference_data(session: Session) -> None:
    """Insert the default statuses and categories when the tables are empty."""

    from cleancity.infrastructure.models import CategoryModel, StatusModel

    if session.query(StatusModel).count() == 0:
        session.add_all(
            StatusModel(name=name, color=color, description=description, sort_order=order)
            for name, color, description, order in DEFAULT_STATUSES
        )
        logger.info("Seeded %d report statuses", len(DEFAULT_STATUSES))
    if session.query(CategoryModel).count() == 0:
        session.add_all(
            CategoryModel(name=name, icon=icon, description=description)
            for name, icon, description in DEFAULT_CATEGORIES
        )
        logger.info("Seeded %d report categories", len(DEFAULT_CATEGORIES))
    session.commit()


def initialize_database() -> None:
    """Ensure all ORM models have corresponding tables and reference rows."""

    from cleancity.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)
    session = SessionLocal()
    try:
        seed_reference_data(session)
    finally:
        session.close()


def get_db() -> Generator:
    """Yield a database session and close it afterwards."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
