"""Domain exceptions for the assignment hub.

Presentation layer maps them to HTTP responses in exception handlers
(see assignment_hub.core.exception_handlers).
"""

from typing import Any


class AssignmentHubException(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        body: dict[str, Any] = {"error": self.error_code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class AuthenticationException(AssignmentHubException):
    """Raised when no caller identity can be resolved from the request."""

    def __init__(self, message: str = "User not authenticated") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class SourceFailureException(AssignmentHubException):
    """Raised when a backing source fails for any reason other than being absent.

    Aborts the whole aggregation: partial results are never returned.
    The reason is kept for logs and is not exposed to clients.
    """

    def __init__(self, item_type: str, reason: str) -> None:
        super().__init__(
            f"Failed to read {item_type} assignments",
            "SOURCE_FAILURE",
            {"item_type": item_type},
        )
        self.reason = reason


class SqlNotConfiguredException(AssignmentHubException):
    """Raised when an operation requires Postgres but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
