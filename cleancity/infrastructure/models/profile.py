"""SQLAlchemy model for user profiles."""

from sqlalchemy import Column, DateTime, String, func

from cleancity.infrastructure.database import Base


class ProfileModel(Base):
    """Public profile of an account managed by the authentication provider."""

    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True)
    username = Column(String(50), nullable=True, unique=True, index=True)
    email = Column(String(120), nullable=True, index=True)
    role = Column(String(20), nullable=False, default="citizen")
    avatar_url = Column(String(500), nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())
