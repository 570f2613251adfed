"""My-assignments API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from assignment_hub.domain.enums import ItemType


class AssignmentResponse(BaseModel):
    """One assigned work item in the unified shape."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    item_type: ItemType
    sub_type: str | None = None
    title: str
    description: str
    status: str
    priority: str
    due_date: datetime | None = None
    created_at: datetime
    assigned_at: datetime | None = None
    completed_at: datetime | None = None
    project_id: int
    project_name: str
    assigned_by_name: str | None = None
    final_status: str | None = Field(
        default=None, description="MAS approval outcome; null for other item types"
    )
    is_overdue: bool


class AssignmentSummaryResponse(BaseModel):
    """Counts over the returned (filtered) list."""

    model_config = ConfigDict(from_attributes=True)

    total: int
    overdue: int
    active: int
    by_type: dict[str, int] = Field(
        default_factory=dict, description="Count per item type; all five keys present"
    )


class MyAssignmentsResponse(BaseModel):
    """Ranked assignments: overdue first, then soonest due, then newest."""

    assignments: list[AssignmentResponse]
    summary: AssignmentSummaryResponse


class AssignmentCountsResponse(BaseModel):
    """Active item counts for badge polling."""

    total: int
    task: int = 0
    dds: int = 0
    rfc: int = 0
    rfi: int = 0
    mas: int = 0
