"""Application interfaces (ports)."""

from assignment_hub.application.interfaces.repositories import IAssignmentSource

__all__ = ["IAssignmentSource"]
