"""My-assignments API: unified ranked list and counts-only summary."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from assignment_hub.api.v1.dependencies import (
    get_current_identity,
    get_my_assignments_service,
)
from assignment_hub.application.dtos.assignment import AssignmentFilters
from assignment_hub.application.dtos.identity import CallerIdentity
from assignment_hub.application.use_cases.my_assignments import MyAssignmentsService
from assignment_hub.core.limiter import limit_summary
from assignment_hub.domain.enums import ItemType, StatusClass
from assignment_hub.schemas.assignment import (
    AssignmentCountsResponse,
    AssignmentResponse,
    AssignmentSummaryResponse,
    MyAssignmentsResponse,
)

router = APIRouter()


@router.get("", response_model=MyAssignmentsResponse)
async def list_my_assignments(
    identity: Annotated[CallerIdentity, Depends(get_current_identity)],
    service: Annotated[MyAssignmentsService, Depends(get_my_assignments_service)],
    project_id: int | None = Query(None, description="Restrict to one project"),
    item_type: ItemType | None = Query(None, alias="type", description="Item type"),
    status_class: StatusClass | None = Query(
        None, alias="status", description="active | completed (omit for all)"
    ),
):
    """Everything assigned to the caller, overdue first, then soonest due, then newest."""
    result = await service.list_assignments(
        user_id=identity.user_id,
        filters=AssignmentFilters(
            project_id=project_id, item_type=item_type, status_class=status_class
        ),
    )
    return MyAssignmentsResponse(
        assignments=[
            AssignmentResponse.model_validate(a) for a in result.assignments
        ],
        summary=AssignmentSummaryResponse.model_validate(result.summary),
    )


@router.get("/summary", response_model=AssignmentCountsResponse)
@limit_summary
async def my_assignments_summary(
    request: Request,
    identity: Annotated[CallerIdentity, Depends(get_current_identity)],
    service: Annotated[MyAssignmentsService, Depends(get_my_assignments_service)],
):
    """Active item counts per type (cheap; for navigation badges)."""
    counts = await service.count_active(user_id=identity.user_id)
    return AssignmentCountsResponse(total=counts.total, **counts.by_type)
