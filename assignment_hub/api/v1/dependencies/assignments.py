"""My-assignments service dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from assignment_hub.application.use_cases.my_assignments import MyAssignmentsService
from assignment_hub.infrastructure.persistence.database import get_session_factory
from assignment_hub.infrastructure.persistence.repositories import (
    build_assignment_sources,
)
from assignment_hub.infrastructure.persistence.safe_query import SafeQueryExecutor


async def get_safe_query_executor() -> SafeQueryExecutor:
    """Executor opening one read session per source query."""
    return SafeQueryExecutor(get_session_factory())


async def get_my_assignments_service(
    executor: Annotated[SafeQueryExecutor, Depends(get_safe_query_executor)],
) -> MyAssignmentsService:
    """Aggregation service over all five sources."""
    return MyAssignmentsService(build_assignment_sources(executor))
