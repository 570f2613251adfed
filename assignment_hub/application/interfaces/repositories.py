"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
No infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from assignment_hub.domain.enums import ItemType, StatusClass


class IAssignmentSource(Protocol):
    """One backing relation of assignable items (tasks, DDS items, RFCs, ...).

    Rows are mappings with the canonical columns: id, title, description,
    status, priority, due_date, created_at, assigned_at, completed_at,
    project_id, project_name, assigned_by_name, sub_type (and final_status
    for MAS). A source that is not provisioned returns no rows.
    """

    item_type: ItemType

    async def fetch_assigned(
        self,
        user_id: int,
        *,
        project_id: int | None = None,
        status_class: StatusClass | None = None,
    ) -> list[Mapping[str, Any]]:
        """Return rows assigned to user_id, newest first."""

    async def count_active(self, user_id: int) -> int:
        """Return how many non-terminal items are assigned to user_id."""
