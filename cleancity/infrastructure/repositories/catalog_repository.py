"""Persistence layer for the status and category catalogues."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from cleancity.domain.entities import Category, ReportStatus
from cleancity.infrastructure.models import CategoryModel, StatusModel


def status_to_entity(model: StatusModel | None) -> ReportStatus | None:
    if model is None:
        return None
    return ReportStatus(
        id=model.id,
        name=model.name,
        color=model.color,
        description=model.description,
        sort_order=model.sort_order,
    )


def category_to_entity(model: CategoryModel | None) -> Category | None:
    if model is None:
        return None
    return Category(
        id=model.id, name=model.name, icon=model.icon, description=model.description
    )


class CatalogRepository:
    """Read-only access to statuses and categories."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_statuses(self) -> Sequence[ReportStatus]:
        query = self.session.query(StatusModel).order_by(
            StatusModel.sort_order, StatusModel.id
        )
        return [status_to_entity(model) for model in query.all()]

    def get_status(self, status_id: int) -> ReportStatus | None:
        return status_to_entity(self.session.get(StatusModel, status_id))

    def get_status_by_name(self, name: str) -> ReportStatus | None:
        model = (
            self.session.query(StatusModel)
            .filter(func.lower(StatusModel.name) == name.strip().lower())
            .first()
        )
        return status_to_entity(model)

    def list_categories(self) -> Sequence[Category]:
        query = self.session.query(CategoryModel).order_by(CategoryModel.name)
        return [category_to_entity(model) for model in query.all()]

    def get_category(self, category_id: int) -> Category | None:
        return category_to_entity(self.session.get(CategoryModel, category_id))
