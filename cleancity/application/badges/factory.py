"""Factory functions building badges for the admin ticket table."""

from __future__ import annotations

from typing import Protocol

from cleancity.domain.entities import Profile, RenderedBadge, ReportStatus

from .config import (
    VARIANT_OUTLINE,
    VARIANT_SECONDARY,
    get_priority_badge_variant,
    get_status_badge_variant,
)


class BadgeComponent(Protocol):
    def render(self) -> RenderedBadge: ...

    def get_label(self) -> str: ...


class StatusBadge:
    def __init__(self, status: ReportStatus | None) -> None:
        self.status = status

    def get_label(self) -> str:
        return (self.status.name if self.status else None) or "Unknown"

    def render(self) -> RenderedBadge:
        label = self.get_label()
        return RenderedBadge(label=label, variant=get_status_badge_variant(label))


class PriorityBadge:
    def __init__(self, priority: str | None) -> None:
        self.priority = priority

    def get_label(self) -> str:
        return self.priority or "N/A"

    def render(self) -> RenderedBadge:
        label = self.get_label()
        return RenderedBadge(label=label, variant=get_priority_badge_variant(label))


class AssignmentBadge:
    def __init__(self, worker: Profile | None) -> None:
        self.worker = worker

    def get_label(self) -> str:
        if self.worker is None:
            return "Unassigned"
        return self.worker.username or self.worker.email or "Unassigned"

    def render(self) -> RenderedBadge:
        if self.worker is None:
            return RenderedBadge(
                label="Unassigned",
                variant=VARIANT_OUTLINE,
                class_name="text-muted-foreground",
            )
        name = self.worker.username or self.worker.email or "Unknown"
        return RenderedBadge(label=name, variant=VARIANT_SECONDARY)


class CategoryBadge:
    def __init__(self, category_name: str | None) -> None:
        self.category_name = category_name

    def get_label(self) -> str:
        return self.category_name or "N/A"

    def render(self) -> RenderedBadge:
        return RenderedBadge(label=self.get_label(), variant=VARIANT_OUTLINE)


def create_status_badge(status: ReportStatus | None) -> BadgeComponent:
    return StatusBadge(status)


def create_priority_badge(priority: str | None) -> BadgeComponent:
    return PriorityBadge(priority)


def create_assignment_badge(worker: Profile | None) -> BadgeComponent:
    return AssignmentBadge(worker)


def create_category_badge(category_name: str | None) -> BadgeComponent:
    return CategoryBadge(category_name)


__all__ = [
    "AssignmentBadge",
    "BadgeComponent",
    "CategoryBadge",
    "PriorityBadge",
    "StatusBadge",
    "create_assignment_badge",
    "create_category_badge",
    "create_priority_badge",
    "create_status_badge",
]
