"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from assignment_hub.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def summary_rate_limit() -> str:
    """Limit for the counts-only endpoint (read at request time)."""
    return get_settings().summary_rate_limit


limit_summary = limiter.limit(summary_rate_limit)
