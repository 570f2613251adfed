"""MAS source: material approval sheets assigned to a user.

Completion is tracked in final_status, not in the displayed status, so
final_status is selected alongside the canonical columns.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, FromClause, func, literal_column, null

from assignment_hub.domain.enums import ItemType
from assignment_hub.infrastructure.persistence.repositories.base import (
    AssignmentSourceRepository,
    assigner,
)
from assignment_hub.infrastructure.persistence.tables import (
    material_approval_sheets,
    projects,
)


class MasSourceRepository(AssignmentSourceRepository):
    """Reads ``material_approval_sheets``."""

    item_type = ItemType.MAS
    source = material_approval_sheets

    def _select_columns(self) -> list[ColumnElement[Any]]:
        m = material_approval_sheets.c
        return [
            m.id,
            m.material_name.label("title"),
            func.coalesce(m.material_category, literal_column("''")).label("description"),
            m.status,
            m.final_status,
            literal_column("'normal'").label("priority"),
            m.due_date,
            m.created_at,
            m.assigned_at,
            null().label("completed_at"),
            projects.c.name.label("project_name"),
            m.project_id,
            assigner.c.full_name.label("assigned_by_name"),
            literal_column("'material_approval'").label("sub_type"),
        ]

    def _select_from(self) -> FromClause:
        return material_approval_sheets.join(
            projects, projects.c.id == material_approval_sheets.c.project_id
        ).outerjoin(
            assigner, assigner.c.id == material_approval_sheets.c.assigned_by_id
        )
