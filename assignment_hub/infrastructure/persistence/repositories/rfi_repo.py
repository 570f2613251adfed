"""RFI source: requests for information assigned to a user."""

from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, FromClause, func, literal_column, null

from assignment_hub.domain.enums import ItemType
from assignment_hub.infrastructure.persistence.repositories.base import (
    AssignmentSourceRepository,
    assigner,
)
from assignment_hub.infrastructure.persistence.tables import (
    projects,
    requests_for_information,
)


class RfiSourceRepository(AssignmentSourceRepository):
    """Reads ``requests_for_information``; title falls back to the reference number."""

    item_type = ItemType.RFI
    source = requests_for_information

    def _select_columns(self) -> list[ColumnElement[Any]]:
        r = requests_for_information.c
        return [
            r.id,
            func.coalesce(r.rfi_subject, r.rfi_ref_no).label("title"),
            r.rfi_description.label("description"),
            r.status,
            r.priority,
            r.due_date,
            r.created_at,
            r.assigned_at,
            null().label("completed_at"),
            projects.c.name.label("project_name"),
            r.project_id,
            assigner.c.full_name.label("assigned_by_name"),
            literal_column("'information_request'").label("sub_type"),
        ]

    def _select_from(self) -> FromClause:
        return requests_for_information.join(
            projects, projects.c.id == requests_for_information.c.project_id
        ).outerjoin(
            assigner, assigner.c.id == requests_for_information.c.assigned_by_id
        )
