"""DTO for the resolved caller (no dependency on the token format)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CallerIdentity:
    """Authenticated user the assignment list is built for."""

    user_id: int
    email: str | None = None
