"""Persistence layer for user profiles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from cleancity.domain.entities import Profile
from cleancity.infrastructure.models import ProfileModel


def profile_to_entity(model: ProfileModel | None) -> Profile | None:
    if model is None:
        return None
    return Profile(
        id=model.id,
        username=model.username,
        email=model.email,
        role=model.role,
        avatar_url=model.avatar_url,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class ProfileRepository:
    """Read and store profiles mirrored from the authentication provider."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, profile_id: str) -> Profile | None:
        return profile_to_entity(self.session.get(ProfileModel, profile_id))

    def get_by_username(self, username: str) -> Profile | None:
        model = (
            self.session.query(ProfileModel)
            .filter(func.lower(ProfileModel.username) == username.lower())
            .first()
        )
        return profile_to_entity(model)

    def list_by_usernames(self, usernames: Iterable[str]) -> Sequence[Profile]:
        lowered = {name.lower() for name in usernames if name}
        if not lowered:
            return []
        query = self.session.query(ProfileModel).filter(
            func.lower(ProfileModel.username).in_(lowered)
        )
        return [profile_to_entity(model) for model in query.all()]

    def list_by_role(self, role: str) -> Sequence[Profile]:
        query = (
            self.session.query(ProfileModel)
            .filter(ProfileModel.role == role)
            .order_by(ProfileModel.username)
        )
        return [profile_to_entity(model) for model in query.all()]

    def create(self, profile: Profile) -> Profile:
        model = ProfileModel(
            id=profile.id,
            username=profile.username,
            email=profile.email,
            role=profile.role,
            avatar_url=profile.avatar_url,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return profile_to_entity(model)
