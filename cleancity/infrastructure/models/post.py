"""SQLAlchemy models for the community feed."""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship

from cleancity.infrastructure.database import Base


class PostModel(Base):
    """Database representation of a community post."""

    __tablename__ = "post"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    user_id = Column(String(36), ForeignKey("profiles.id"), nullable=True, index=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())

    author = relationship("ProfileModel", lazy="joined")
    comments = relationship(
        "PostCommentModel",
        back_populates="post",
        cascade="all, delete-orphan",
    )
    ratings = relationship(
        "PostRatingModel",
        cascade="all, delete-orphan",
    )


class PostCommentModel(Base):
    """Comment written under a community post."""

    __tablename__ = "post_comment"

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(
        Integer, ForeignKey("post.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(String(36), ForeignKey("profiles.id"), nullable=True)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())

    post = relationship("PostModel", back_populates="comments")
    user = relationship("ProfileModel", lazy="joined")


class PostRatingModel(Base):
    """One user's 1-5 rating of a post."""

    __tablename__ = "post_rating"
    __table_args__ = (UniqueConstraint("post_id", "user_id", name="uq_post_rating_user"),)

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(
        Integer, ForeignKey("post.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(String(36), ForeignKey("profiles.id"), nullable=False)
    rating = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
