"""Shared utilities (UTC datetime helpers)."""

from assignment_hub.shared.utils.datetime import ensure_utc, to_utc_datetime, utc_now

__all__ = ["ensure_utc", "to_utc_datetime", "utc_now"]
