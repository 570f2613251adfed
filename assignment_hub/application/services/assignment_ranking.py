"""Type filter and global ranking of assignments from all sources."""

from __future__ import annotations

from collections.abc import Iterable

from assignment_hub.application.dtos.assignment import Assignment
from assignment_hub.domain.enums import ItemType


def filter_by_type(
    items: Iterable[Assignment], item_type: ItemType | None
) -> list[Assignment]:
    """Keep only items of item_type; pass everything through when None."""
    if item_type is None:
        return list(items)
    return [i for i in items if i.item_type == item_type]


def _rank_key(item: Assignment) -> tuple[bool, bool, float, float]:
    # overdue first; due date ascending with missing dates last; newest created first
    return (
        not item.is_overdue,
        item.due_date is None,
        item.due_date.timestamp() if item.due_date is not None else 0.0,
        -item.created_at.timestamp(),
    )


def rank_assignments(items: Iterable[Assignment]) -> list[Assignment]:
    """Sort the concatenation of all sources into one total order.

    Keys, most significant first: is_overdue descending, due_date ascending
    (items without one after all items with one), created_at descending.
    sorted() is stable, so fully equal keys keep their input order.
    """
    return sorted(items, key=_rank_key)
