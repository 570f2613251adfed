"""Base source repository: shared query building for every assignment source.

A subclass names its relation, its select list (already in the canonical
column shape) and its joins. Filtering on the caller, project and status
class, the created_at ordering and the counts-only query live here, with
status classes compiled from the domain completion rule.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from sqlalchemy import ColumnElement, FromClause, Select, func, or_, select
from sqlalchemy.sql.expression import TableClause

from assignment_hub.domain.completion import CompletionRule, completion_rule
from assignment_hub.domain.enums import ItemType, StatusClass
from assignment_hub.infrastructure.persistence.safe_query import SafeQueryExecutor
from assignment_hub.infrastructure.persistence.tables import users

# Users joined as the assigning actor (aliased so it never collides with a source join).
assigner = users.alias("assigner")


def terminal_clause(rule: CompletionRule, column: ColumnElement[Any]) -> ColumnElement[bool]:
    """SQL equivalent of rule.is_terminal(column)."""
    if rule.open_value is not None:
        return or_(column.is_(None), column != rule.open_value)
    return column.in_(sorted(rule.terminal_values))


def active_clause(rule: CompletionRule, column: ColumnElement[Any]) -> ColumnElement[bool]:
    """SQL equivalent of rule.is_active(column).

    NULL counts as active for status sets and as terminal under an open value.
    """
    if rule.open_value is not None:
        return column == rule.open_value
    return or_(column.is_(None), column.not_in(sorted(rule.terminal_values)))


class AssignmentSourceRepository:
    """Read-only repository over one assignable relation. Implements IAssignmentSource."""

    item_type: ClassVar[ItemType]
    source: ClassVar[TableClause]

    def __init__(self, executor: SafeQueryExecutor) -> None:
        self.executor = executor

    @property
    def rule(self) -> CompletionRule:
        return completion_rule(self.item_type)

    def _select_columns(self) -> list[ColumnElement[Any]]:
        """Columns labelled with the canonical names (see IAssignmentSource)."""
        raise NotImplementedError

    def _select_from(self) -> FromClause:
        """Source relation joined to projects (and assigner where tracked)."""
        raise NotImplementedError

    def _project_column(self) -> ColumnElement[Any]:
        return self.source.c.project_id

    def _completion_column(self) -> ColumnElement[Any]:
        return self.source.c[self.rule.field]

    def build_select(
        self,
        user_id: int,
        *,
        project_id: int | None = None,
        status_class: StatusClass | None = None,
    ) -> Select:
        """Build the list query for user_id with optional filters."""
        stmt = (
            select(*self._select_columns())
            .select_from(self._select_from())
            .where(self.source.c.assigned_to_id == user_id)
        )
        if project_id is not None:
            stmt = stmt.where(self._project_column() == project_id)
        if status_class == StatusClass.ACTIVE:
            stmt = stmt.where(active_clause(self.rule, self._completion_column()))
        elif status_class == StatusClass.COMPLETED:
            stmt = stmt.where(terminal_clause(self.rule, self._completion_column()))
        return stmt.order_by(self.source.c.created_at.desc())

    def build_active_count(self, user_id: int) -> Select:
        """Build COUNT(*) of active items assigned to user_id (no joins)."""
        return (
            select(func.count())
            .select_from(self.source)
            .where(
                self.source.c.assigned_to_id == user_id,
                active_clause(self.rule, self._completion_column()),
            )
        )

    async def fetch_assigned(
        self,
        user_id: int,
        *,
        project_id: int | None = None,
        status_class: StatusClass | None = None,
    ) -> list[Mapping[str, Any]]:
        """Return rows assigned to user_id, newest first ([] if not provisioned)."""
        stmt = self.build_select(
            user_id, project_id=project_id, status_class=status_class
        )
        return await self.executor.fetch_all(stmt, source=self.item_type)

    async def count_active(self, user_id: int) -> int:
        """Return the active item count for user_id (0 if not provisioned)."""
        return await self.executor.fetch_count(
            self.build_active_count(user_id), source=self.item_type
        )
