from fastapi import FastAPI

from .notifications import router as notifications_router
from .posts import router as posts_router
from .reports import router as reports_router
from .tickets import router as tickets_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(reports_router)
    app.include_router(tickets_router)
    app.include_router(posts_router)
    app.include_router(notifications_router)
