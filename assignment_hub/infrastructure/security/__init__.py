"""Security: bearer token verification."""

from assignment_hub.infrastructure.security.jwt import verify_token

__all__ = ["verify_token"]
