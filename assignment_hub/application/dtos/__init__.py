"""Application DTOs: plain dataclasses passed between layers."""

from assignment_hub.application.dtos.assignment import (
    ActiveCounts,
    Assignment,
    AssignmentFilters,
    AssignmentList,
    AssignmentSummary,
)
from assignment_hub.application.dtos.identity import CallerIdentity

__all__ = [
    "ActiveCounts",
    "Assignment",
    "AssignmentFilters",
    "AssignmentList",
    "AssignmentSummary",
    "CallerIdentity",
]
