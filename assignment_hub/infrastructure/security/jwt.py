"""Bearer token verification.

Tokens are issued by the identity service and signed with the shared
SECRET_KEY. This service only verifies them and maps the claims onto a
CallerIdentity: ``sub`` is the integer user id, ``email`` is optional.
"""

from typing import Any

from jose import JWTError, jwt

from assignment_hub.application.dtos.identity import CallerIdentity
from assignment_hub.core.config import get_settings


def _decode(token: str) -> dict[str, Any]:
    settings = get_settings()
    try:
        return jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e


def verify_token(token: str) -> CallerIdentity:
    """Verify a bearer token and return the caller it names.

    Raises:
        ValueError: If the token is invalid or expired, or ``sub`` is not an
            integer user id.
    """
    payload = _decode(token)
    sub = payload.get("sub")
    try:
        user_id = int(sub)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Token subject is not a user id: {sub!r}") from e
    return CallerIdentity(user_id=user_id, email=payload.get("email"))
