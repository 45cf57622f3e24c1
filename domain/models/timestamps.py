"""
Timestamp helpers shared by the domain models.

Every stored timestamp is timezone-aware UTC so that workouts can be ordered
and range-filtered against each other. A naive datetime is taken to be UTC.
"""

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime to timezone-aware UTC.

    Args:
        value: Naive (assumed UTC) or aware datetime, or None

    Returns:
        The same instant in UTC, or None
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
