"""Caller identity dependency (composition root).

Resolves the authenticated user from a bearer JWT (see
assignment_hub.infrastructure.security.jwt). No identity means 401 before any
source is queried.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from assignment_hub.application.dtos.identity import CallerIdentity
from assignment_hub.core.config import get_settings
from assignment_hub.domain.exceptions import AuthenticationException
from assignment_hub.infrastructure.security.jwt import verify_token

logger = logging.getLogger(__name__)

_http_bearer = HTTPBearer(auto_error=False)


def _dev_identity(request: Request) -> CallerIdentity | None:
    """Return the dev-bypass identity when enabled outside production."""
    settings = get_settings()
    if not settings.dev_auth_bypass or settings.is_production:
        return None
    raw = request.headers.get(settings.dev_user_header)
    if not raw:
        return None
    try:
        user_id = int(raw)
    except ValueError as e:
        raise AuthenticationException("Invalid user identity") from e
    logger.info("[DEV] Using dev user bypass for user %s", user_id)
    return CallerIdentity(user_id=user_id)


async def get_current_identity(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> CallerIdentity:
    """Return the caller from the bearer token; raise AuthenticationException if none."""
    if credentials is not None:
        try:
            return verify_token(credentials.credentials)
        except ValueError as e:
            raise AuthenticationException("Invalid or expired token") from e
    identity = _dev_identity(request)
    if identity is None:
        raise AuthenticationException()
    return identity
