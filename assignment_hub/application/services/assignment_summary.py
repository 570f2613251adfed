"""Summary counts over a ranked assignment list and over counts-only results."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from assignment_hub.application.dtos.assignment import (
    ActiveCounts,
    Assignment,
    AssignmentSummary,
)
from assignment_hub.application.services.assignment_state import is_active
from assignment_hub.domain.enums import ItemType


def _zero_by_type() -> dict[str, int]:
    return {t.value: 0 for t in ItemType}


def summarize(items: Sequence[Assignment]) -> AssignmentSummary:
    """Return total, overdue, active and per-type counts for items.

    by_type always carries all five item types, zero when absent.
    """
    by_type = _zero_by_type()
    overdue = 0
    active = 0
    for item in items:
        by_type[item.item_type.value] += 1
        if item.is_overdue:
            overdue += 1
        if is_active(item):
            active += 1
    return AssignmentSummary(
        total=len(items), overdue=overdue, active=active, by_type=by_type
    )


def tally_active_counts(counts: Mapping[ItemType, int]) -> ActiveCounts:
    """Build ActiveCounts from per-type COUNT results (missing types = 0)."""
    by_type = _zero_by_type()
    for item_type, count in counts.items():
        by_type[ItemType(item_type).value] = int(count)
    return ActiveCounts(total=sum(by_type.values()), by_type=by_type)
