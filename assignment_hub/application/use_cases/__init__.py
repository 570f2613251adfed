"""Application use cases."""

from assignment_hub.application.use_cases.my_assignments import MyAssignmentsService

__all__ = ["MyAssignmentsService"]
