"""
Datetime utilities for timezone handling
Catalog timestamps are always offset-aware UTC
"""
from datetime import datetime, timezone
from typing import Union


def ensure_timezone_aware(
    dt: Union[datetime, str], default_tz=timezone.utc
) -> datetime:
    """
    Ensure a datetime object is timezone-aware

    Args:
        dt: datetime object or ISO string that needs to be timezone-aware
        default_tz: timezone to use if dt is naive (defaults to UTC)

    Returns:
        timezone-aware datetime object

    Example:
        >>> ensure_timezone_aware("2025-09-27T12:00:00Z")
        >>> ensure_timezone_aware(datetime(2025, 9, 27, 12, 0))
    """
    if isinstance(dt, str):
        # Handle ISO string format
        dt = datetime.fromisoformat(dt.replace("Z", "+00:00"))

    if dt.tzinfo is not None:
        return dt

    return dt.replace(tzinfo=default_tz)


def utcnow_aware() -> datetime:
    """Current UTC time as timezone-aware datetime"""
    return datetime.now(timezone.utc)
