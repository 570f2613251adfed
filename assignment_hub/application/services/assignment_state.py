"""Derived assignment state: terminal/active and overdue.

Everything here reads the completion rule table in assignment_hub.domain,
so "active" means the same thing for filtering, overdue and summary counts.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from assignment_hub.application.dtos.assignment import Assignment
from assignment_hub.domain.completion import completion_rule


def is_terminal(item: Assignment) -> bool:
    """Return True when the item is closed under its own type's rule."""
    rule = completion_rule(item.item_type)
    return rule.is_terminal(getattr(item, rule.field))


def is_active(item: Assignment) -> bool:
    return not is_terminal(item)


def evaluate_overdue(item: Assignment, now: datetime) -> Assignment:
    """Return a copy of item with is_overdue derived against now.

    Overdue = not terminal, has a due date, and the due date is strictly
    before now. now must be UTC-aware and captured once per request.
    """
    overdue = (
        item.due_date is not None
        and item.due_date < now
        and not is_terminal(item)
    )
    return replace(item, is_overdue=overdue)
