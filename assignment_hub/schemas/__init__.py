"""API request/response schemas (Pydantic)."""

from assignment_hub.schemas.assignment import (
    AssignmentCountsResponse,
    AssignmentResponse,
    AssignmentSummaryResponse,
    MyAssignmentsResponse,
)
from assignment_hub.schemas.health import HealthResponse

__all__ = [
    "AssignmentCountsResponse",
    "AssignmentResponse",
    "AssignmentSummaryResponse",
    "HealthResponse",
    "MyAssignmentsResponse",
]
