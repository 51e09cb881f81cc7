"""SQLAlchemy models for the report status and category catalogues."""

from sqlalchemy import Column, Integer, String, Text

from cleancity.infrastructure.database import Base


class StatusModel(Base):
    """Workflow state a report can be in."""

    __tablename__ = "status"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False, unique=True)
    color = Column(String(20), nullable=False, default="#6b7280")
    description = Column(Text, nullable=True)
    sort_order = Column(Integer, nullable=False, default=0)


class CategoryModel(Base):
    """Kind of issue a report is filed under."""

    __tablename__ = "category"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True)
    icon = Column(String(16), nullable=False, default="📌")
    description = Column(Text, nullable=True)
