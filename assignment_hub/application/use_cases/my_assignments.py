"""My-assignments use cases: unified ranked list and counts-only summary.

Both fan out to every source concurrently and join on all of them. A source
that is not provisioned contributes nothing (handled below the source
interface); any other source error fails the whole request.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import TYPE_CHECKING

from assignment_hub.application.dtos.assignment import (
    ActiveCounts,
    Assignment,
    AssignmentFilters,
    AssignmentList,
)
from assignment_hub.application.services.assignment_normalizer import normalize_row
from assignment_hub.application.services.assignment_ranking import (
    filter_by_type,
    rank_assignments,
)
from assignment_hub.application.services.assignment_state import evaluate_overdue
from assignment_hub.application.services.assignment_summary import (
    summarize,
    tally_active_counts,
)
from assignment_hub.shared.telemetry.tracing import add_span_attributes, traced
from assignment_hub.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from assignment_hub.application.interfaces.repositories import IAssignmentSource

logger = logging.getLogger(__name__)


class MyAssignmentsService:
    """Aggregate assignments for one caller across all sources."""

    def __init__(
        self,
        sources: Sequence["IAssignmentSource"],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.sources = list(sources)
        self.clock = clock

    async def _load_source(
        self, source: "IAssignmentSource", user_id: int, filters: AssignmentFilters
    ) -> list[Assignment]:
        rows = await source.fetch_assigned(
            user_id,
            project_id=filters.project_id,
            status_class=filters.status_class,
        )
        return [normalize_row(source.item_type, row) for row in rows]

    @traced("my_assignments.list")
    async def list_assignments(
        self, *, user_id: int, filters: AssignmentFilters | None = None
    ) -> AssignmentList:
        """Return the caller's assignments, ranked, with summary counts.

        Raises:
            SourceFailureException: when any source fails (no partial result).
        """
        filters = filters or AssignmentFilters()
        # one clock reading so every overdue comparison in the response agrees
        now = self.clock()
        batches = await asyncio.gather(
            *(self._load_source(s, user_id, filters) for s in self.sources)
        )
        items = [evaluate_overdue(item, now) for batch in batches for item in batch]
        ranked = rank_assignments(filter_by_type(items, filters.item_type))
        summary = summarize(ranked)
        add_span_attributes(
            **{"assignments.total": summary.total, "assignments.overdue": summary.overdue}
        )
        logger.debug(
            "Built %d assignments for user %s (%d overdue)",
            summary.total,
            user_id,
            summary.overdue,
        )
        return AssignmentList(assignments=ranked, summary=summary)

    @traced("my_assignments.count_active")
    async def count_active(self, *, user_id: int) -> ActiveCounts:
        """Return active item counts per type without building assignments."""
        counts = await asyncio.gather(
            *(s.count_active(user_id) for s in self.sources)
        )
        return tally_active_counts(
            {s.item_type: c for s, c in zip(self.sources, counts, strict=True)}
        )
