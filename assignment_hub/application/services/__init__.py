"""Application services: pure normalization, state, ranking and summary logic."""

from assignment_hub.application.services.assignment_normalizer import normalize_row
from assignment_hub.application.services.assignment_ranking import (
    filter_by_type,
    rank_assignments,
)
from assignment_hub.application.services.assignment_state import (
    evaluate_overdue,
    is_active,
    is_terminal,
)
from assignment_hub.application.services.assignment_summary import (
    summarize,
    tally_active_counts,
)

__all__ = [
    "evaluate_overdue",
    "filter_by_type",
    "is_active",
    "is_terminal",
    "normalize_row",
    "rank_assignments",
    "summarize",
    "tally_active_counts",
]
