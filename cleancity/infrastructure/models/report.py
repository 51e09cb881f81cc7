"""SQLAlchemy models for reports and their comments."""

from uuid import uuid4

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from cleancity.infrastructure.database import Base


def _new_id() -> str:
    return str(uuid4())


class ReportModel(Base):
    """Database representation of a citizen report."""

    __tablename__ = "report"

    id = Column(String(36), primary_key=True, default=_new_id)
    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    address = Column(String(255), nullable=True)
    category_id = Column(Integer, ForeignKey("category.id"), nullable=False, index=True)
    status_id = Column(Integer, ForeignKey("status.id"), nullable=False, index=True)
    priority = Column(String(10), nullable=False, default="medium")
    user_id = Column(String(36), ForeignKey("profiles.id"), nullable=True, index=True)
    assigned_worker_id = Column(String(36), ForeignKey("profiles.id"), nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    resolved_at = Column(DateTime, nullable=True)

    category = relationship("CategoryModel", lazy="joined")
    status = relationship("StatusModel", lazy="joined")
    user = relationship("ProfileModel", foreign_keys=[user_id], lazy="joined")
    assigned_worker = relationship(
        "ProfileModel", foreign_keys=[assigned_worker_id], lazy="joined"
    )
    comments = relationship(
        "CommentModel",
        back_populates="report",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class CommentModel(Base):
    """Comment left under a report."""

    __tablename__ = "comment"

    id = Column(String(36), primary_key=True, default=_new_id)
    report_id = Column(
        String(36), ForeignKey("report.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(String(36), ForeignKey("profiles.id"), nullable=True)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())

    report = relationship("ReportModel", back_populates="comments")
    user = relationship("ProfileModel", lazy="joined")
