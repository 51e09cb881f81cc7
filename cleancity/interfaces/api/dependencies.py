"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, Query, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from cleancity.application.decorators.posts import (
    PostDecoratorChain,
    create_configured_decorator_chain,
)
from cleancity.application.events import EventBus
from cleancity.application.formatting import BasePostFormatter, create_formatter
from cleancity.application.services import LoggingTicketService, SqlTicketService, TicketService
from cleancity.config import Settings, get_settings
from cleancity.domain.entities import Profile
from cleancity.infrastructure.database import get_db
from cleancity.infrastructure.notifications import NotificationDispatcher
from cleancity.infrastructure.repositories import ProfileRepository
from cleancity.infrastructure.security import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_profile(token: str, db: Session) -> Profile:
    """Resolve the profile that owns the provided access token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _unauthorized("Invalid credentials") from exc

    profile_id = payload.get("sub")
    if not isinstance(profile_id, str) or not profile_id:
        raise _unauthorized("Invalid credentials")

    profile = ProfileRepository(db).get(profile_id)
    if profile is None:
        raise _unauthorized("Profile not found")
    return profile


def get_current_profile(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> Profile:
    """Return the authenticated profile from the bearer token."""

    if credentials is None or not credentials.credentials:
        raise _unauthorized("Not authenticated")
    return resolve_current_profile(credentials.credentials, db)


def require_admin(current_profile: Profile = Depends(get_current_profile)) -> Profile:
    """Ensure the authenticated profile has administrator privileges."""

    if not current_profile.is_admin():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized",
        )
    return current_profile


def get_event_bus(request: Request) -> EventBus:
    return request.app.state.event_bus


def get_dispatcher(request: Request) -> NotificationDispatcher:
    return request.app.state.dispatcher


def get_ticket_service(db: Session = Depends(get_db)) -> TicketService:
    return LoggingTicketService(SqlTicketService(db))


def get_post_decorator_chain(
    settings: Settings = Depends(get_settings),
) -> PostDecoratorChain:
    return create_configured_decorator_chain(
        new_hours=settings.post_new_hours,
        popular_rating=settings.post_popular_rating,
        verified_author_ids=settings.verified_author_ids,
    )


def get_post_formatter(
    style: str = Query(default="standard", pattern="^(standard|relative|compact)$"),
) -> BasePostFormatter:
    return create_formatter(style)
