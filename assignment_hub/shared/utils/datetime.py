"""
UTC datetime utilities for consistent timezone handling.

All datetime values compared by the service should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
"""

from datetime import UTC, date, datetime, time


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at repository/persistence boundaries to normalize datetimes.
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        # Naive datetime - assume it's UTC and attach timezone
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def to_utc_datetime(value: datetime | date | None) -> datetime | None:
    """
    Coerce a DATE or TIMESTAMP column value to a UTC-aware datetime.

    Sources store due dates as either DATE or TIMESTAMPTZ; a bare date
    becomes midnight UTC of that day.

    Args:
        value: datetime, date or None as returned by the driver

    Returns:
        UTC-aware datetime or None
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    return datetime.combine(value, time.min, tzinfo=UTC)
