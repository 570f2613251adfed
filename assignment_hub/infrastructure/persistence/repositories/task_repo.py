"""Task source: project tasks assigned to a user."""

from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, FromClause

from assignment_hub.domain.enums import ItemType
from assignment_hub.infrastructure.persistence.repositories.base import (
    AssignmentSourceRepository,
    assigner,
)
from assignment_hub.infrastructure.persistence.tables import projects, tasks


class TaskSourceRepository(AssignmentSourceRepository):
    """Reads ``tasks``; sub_type is the task's own task_type."""

    item_type = ItemType.TASK
    source = tasks

    def _select_columns(self) -> list[ColumnElement[Any]]:
        t = tasks.c
        return [
            t.id,
            t.title,
            t.description,
            t.status,
            t.priority,
            t.due_date,
            t.created_at,
            t.assigned_at,
            t.completed_at,
            projects.c.name.label("project_name"),
            projects.c.id.label("project_id"),
            assigner.c.full_name.label("assigned_by_name"),
            t.task_type.label("sub_type"),
        ]

    def _select_from(self) -> FromClause:
        return tasks.join(projects, projects.c.id == tasks.c.project_id).outerjoin(
            assigner, assigner.c.id == tasks.c.assigned_by_id
        )
