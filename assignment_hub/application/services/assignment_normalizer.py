"""Map raw source rows into the canonical Assignment shape.

Pure and total over any row a source repository produces: missing optional
columns fall back to defaults instead of raising.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from assignment_hub.application.dtos.assignment import Assignment
from assignment_hub.domain.enums import ItemType
from assignment_hub.shared.utils.datetime import to_utc_datetime

DEFAULT_PRIORITY = "normal"


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def normalize_row(item_type: ItemType, row: Mapping[str, Any]) -> Assignment:
    """Build an Assignment from one source row, tagged with item_type.

    priority defaults to "normal", assigned_by_name to None, title and
    description to "". Dates are coerced to UTC-aware datetimes.
    is_overdue is left False; see evaluate_overdue.
    """
    return Assignment(
        id=row["id"],
        item_type=ItemType(item_type),
        sub_type=row.get("sub_type"),
        title=_text(row.get("title")),
        description=_text(row.get("description")),
        status=_text(row.get("status")),
        priority=row.get("priority") or DEFAULT_PRIORITY,
        due_date=to_utc_datetime(row.get("due_date")),
        created_at=to_utc_datetime(row["created_at"]),
        assigned_at=to_utc_datetime(row.get("assigned_at")),
        completed_at=to_utc_datetime(row.get("completed_at")),
        project_id=row["project_id"],
        project_name=_text(row.get("project_name")),
        assigned_by_name=row.get("assigned_by_name"),
        final_status=row.get("final_status"),
    )
