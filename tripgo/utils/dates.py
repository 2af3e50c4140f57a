"""
Datetime helpers. Timestamps are stored as naive UTC.
"""

from datetime import datetime, timezone


def naive_utc(value: datetime | None) -> datetime | None:
    """Convert an aware datetime to naive UTC; naive values pass through"""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
