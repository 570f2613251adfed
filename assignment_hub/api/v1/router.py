"""API v1 router aggregation."""

from fastapi import APIRouter

from assignment_hub.api.v1.endpoints import health, my_assignments

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    my_assignments.router, prefix="/my-assignments", tags=["my-assignments"]
)
