"""Persistence layer for reports and report comments."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from cleancity.domain.entities import Report, ReportComment, ReportFilters
from cleancity.infrastructure.models import CommentModel, ReportModel
from cleancity.utils import to_naive_utc

from .catalog_repository import category_to_entity, status_to_entity
from .profile_repository import profile_to_entity

_ORDERABLE_COLUMNS = {
    "created_at": ReportModel.created_at,
    "title": ReportModel.title,
    "priority": ReportModel.priority,
    "status_id": ReportModel.status_id,
}


class ReportRepository:
    """Provide CRUD operations for report entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, filters: ReportFilters | None = None) -> Sequence[Report]:
        filters = filters or ReportFilters()
        query = self.session.query(ReportModel)
        if filters.status_id is not None:
            query = query.filter(ReportModel.status_id == filters.status_id)
        if filters.category_id is not None:
            query = query.filter(ReportModel.category_id == filters.category_id)
        if filters.user_id is not None:
            query = query.filter(ReportModel.user_id == filters.user_id)
        if filters.priority is not None:
            query = query.filter(ReportModel.priority == filters.priority)

        column = _ORDERABLE_COLUMNS.get(filters.order_by, ReportModel.created_at)
        ordering = column.asc() if filters.order_direction == "asc" else column.desc()
        query = query.order_by(ordering, ReportModel.id)
        if filters.offset:
            query = query.offset(filters.offset)
        if filters.limit:
            query = query.limit(filters.limit)
        return [self._to_entity(model) for model in query.all()]

    def get(self, report_id: str) -> Report | None:
        model = self.session.get(ReportModel, report_id)
        return self._to_entity(model) if model else None

    def create(self, report: Report) -> Report:
        model = ReportModel()
        self._apply_entity_to_model(model, report)
        if report.id:
            model.id = report.id
        if report.created_at:
            model.created_at = to_naive_utc(report.created_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, report: Report) -> Report:
        model = self.session.get(ReportModel, report.id)
        if not model:
            msg = f"Report with id {report.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, report)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_comments(self, report_id: str) -> Sequence[ReportComment]:
        query = (
            self.session.query(CommentModel)
            .filter(CommentModel.report_id == report_id)
            .order_by(CommentModel.created_at, CommentModel.id)
        )
        return [self._comment_to_entity(model) for model in query.all()]

    def add_comment(self, comment: ReportComment) -> ReportComment:
        model = CommentModel(
            report_id=comment.report_id,
            user_id=comment.user_id,
            content=comment.content,
        )
        if comment.created_at:
            model.created_at = to_naive_utc(comment.created_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._comment_to_entity(model)

    @staticmethod
    def _apply_entity_to_model(model: ReportModel, report: Report) -> None:
        model.title = report.title
        model.description = report.description
        model.latitude = report.latitude
        model.longitude = report.longitude
        model.address = report.address
        model.category_id = report.category_id
        model.status_id = report.status_id
        model.priority = report.priority
        model.user_id = report.user_id
        model.assigned_worker_id = report.assigned_worker_id
        model.resolved_at = to_naive_utc(report.resolved_at)

    @staticmethod
    def _to_entity(model: ReportModel) -> Report:
        return Report(
            id=model.id,
            title=model.title,
            description=model.description,
            latitude=model.latitude,
            longitude=model.longitude,
            category_id=model.category_id,
            status_id=model.status_id,
            priority=model.priority,
            address=model.address,
            user_id=model.user_id,
            assigned_worker_id=model.assigned_worker_id,
            created_at=model.created_at,
            resolved_at=model.resolved_at,
            category=category_to_entity(model.category),
            status=status_to_entity(model.status),
            user=profile_to_entity(model.user),
            assigned_worker=profile_to_entity(model.assigned_worker),
        )

    @staticmethod
    def _comment_to_entity(model: CommentModel) -> ReportComment:
        return ReportComment(
            id=model.id,
            report_id=model.report_id,
            content=model.content,
            user_id=model.user_id,
            created_at=model.created_at,
            user=profile_to_entity(model.user),
        )
