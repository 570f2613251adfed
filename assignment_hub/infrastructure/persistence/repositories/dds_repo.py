"""DDS source: design data sheet items assigned to a user.

Items belong to a sheet (``dds``) which carries the project. There is no
priority, assigner or assigned_at on an item.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, FromClause, literal_column, null

from assignment_hub.domain.enums import ItemType
from assignment_hub.infrastructure.persistence.repositories.base import (
    AssignmentSourceRepository,
)
from assignment_hub.infrastructure.persistence.tables import dds, dds_items, projects


class DdsSourceRepository(AssignmentSourceRepository):
    """Reads ``dds_items`` joined through ``dds``; sub_type is the discipline."""

    item_type = ItemType.DDS
    source = dds_items

    def _select_columns(self) -> list[ColumnElement[Any]]:
        di = dds_items.c
        return [
            di.id,
            di.item_name.label("title"),
            di.item_category.label("description"),
            di.status,
            literal_column("'normal'").label("priority"),
            di.expected_completion_date.label("due_date"),
            di.created_at,
            null().label("assigned_at"),
            di.actual_completion_date.label("completed_at"),
            projects.c.name.label("project_name"),
            dds.c.project_id,
            null().label("assigned_by_name"),
            di.discipline.label("sub_type"),
        ]

    def _select_from(self) -> FromClause:
        return dds_items.join(dds, dds.c.id == dds_items.c.dds_id).join(
            projects, projects.c.id == dds.c.project_id
        )

    def _project_column(self) -> ColumnElement[Any]:
        return dds.c.project_id
