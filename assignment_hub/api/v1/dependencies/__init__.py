"""Presentation-layer dependency injection (composition root).

Routes depend only on these providers, never on infrastructure directly.
"""

from assignment_hub.api.v1.dependencies.assignments import (
    get_my_assignments_service,
    get_safe_query_executor,
)
from assignment_hub.api.v1.dependencies.auth import get_current_identity

__all__ = [
    "get_current_identity",
    "get_my_assignments_service",
    "get_safe_query_executor",
]
