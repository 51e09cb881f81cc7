import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cleancity.application.events import (
    EventBus,
    create_logging_handler,
    create_post_created_handler,
)
from cleancity.application.use_cases.notifications import register_notification_handlers
from cleancity.config import get_settings
from cleancity.domain.entities import PostEvent
from cleancity.infrastructure.database import engine, initialize_database
from cleancity.infrastructure.notifications import NotificationDispatcher, NtfyClient
from cleancity.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables, wire event handlers and release everything on shutdown."""

    settings = get_settings()
    initialize_database()

    bus: EventBus = app.state.event_bus
    subscriptions = register_notification_handlers(
        bus,
        app.state.dispatcher,
        base_url=settings.app_base_url,
        topic_prefix=settings.ntfy_topic_prefix,
    )
    subscriptions.append(bus.subscribe(PostEvent.CREATED, create_post_created_handler()))
    for event in (PostEvent.DELETED, PostEvent.RATED, PostEvent.COMMENTED):
        subscriptions.append(bus.subscribe(event, create_logging_handler(event)))
    logger.info("Subscribed to %s", ", ".join(bus.active_events()))

    yield

    for subscription in subscriptions:
        subscription.unsubscribe()
    app.state.dispatcher.close()
    engine.dispose()


def create_app(
    *,
    event_bus: EventBus | None = None,
    dispatcher: NotificationDispatcher | None = None,
) -> FastAPI:
    """Build the FastAPI application and its single event bus."""

    settings = get_settings()
    _configure_logging(settings.log_level)

    app = FastAPI(title="CleanCity API", lifespan=lifespan)
    app.state.event_bus = event_bus or EventBus()
    app.state.dispatcher = dispatcher or NotificationDispatcher(
        NtfyClient.from_settings(settings), enabled=settings.notifications_enabled
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.app_base_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
