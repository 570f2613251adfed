"""RFC source: requests for change assigned to a user."""

from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, FromClause, literal_column, null

from assignment_hub.domain.enums import ItemType
from assignment_hub.infrastructure.persistence.repositories.base import (
    AssignmentSourceRepository,
    assigner,
)
from assignment_hub.infrastructure.persistence.tables import (
    projects,
    requests_for_change,
)


class RfcSourceRepository(AssignmentSourceRepository):
    """Reads ``requests_for_change``."""

    item_type = ItemType.RFC
    source = requests_for_change

    def _select_columns(self) -> list[ColumnElement[Any]]:
        r = requests_for_change.c
        return [
            r.id,
            r.title,
            r.description,
            r.status,
            r.priority,
            r.due_date,
            r.created_at,
            r.assigned_at,
            null().label("completed_at"),
            projects.c.name.label("project_name"),
            r.project_id,
            assigner.c.full_name.label("assigned_by_name"),
            literal_column("'change_request'").label("sub_type"),
        ]

    def _select_from(self) -> FromClause:
        return requests_for_change.join(
            projects, projects.c.id == requests_for_change.c.project_id
        ).outerjoin(assigner, assigner.c.id == requests_for_change.c.assigned_by_id)
