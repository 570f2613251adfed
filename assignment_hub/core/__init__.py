"""Core: config, exception handlers, lifespan and rate limiter."""

from assignment_hub.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
