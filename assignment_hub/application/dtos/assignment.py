"""DTOs for the unified assignment list (no dependency on ORM or HTTP)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from assignment_hub.domain.enums import ItemType, StatusClass


@dataclass(frozen=True)
class Assignment:
    """One work item assigned to the caller, in the shape shared by all sources.

    Built fresh per request; is_overdue is derived, never read from a source.
    final_status is only populated for MAS rows.
    """

    id: int
    item_type: ItemType
    sub_type: str | None
    title: str
    description: str
    status: str
    priority: str
    due_date: datetime | None
    created_at: datetime
    assigned_at: datetime | None
    completed_at: datetime | None
    project_id: int
    project_name: str
    assigned_by_name: str | None
    final_status: str | None = None
    is_overdue: bool = False


@dataclass(frozen=True)
class AssignmentFilters:
    """Optional filters for the list operation."""

    project_id: int | None = None
    item_type: ItemType | None = None
    status_class: StatusClass | None = None


@dataclass
class AssignmentSummary:
    """Counts over the filtered, ranked list."""

    total: int
    overdue: int
    active: int
    by_type: dict[str, int] = field(default_factory=dict)


@dataclass
class AssignmentList:
    """Ranked assignments plus their summary."""

    assignments: list[Assignment]
    summary: AssignmentSummary


@dataclass
class ActiveCounts:
    """Counts-only result: active items per type for badge polling."""

    total: int
    by_type: dict[str, int] = field(default_factory=dict)
