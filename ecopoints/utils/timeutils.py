"""Local-time helpers. All stored timestamps are timezone-aware."""

from datetime import datetime, timedelta
from typing import Optional


def local_now() -> datetime:
    return datetime.now().astimezone()


def as_local(value: datetime) -> datetime:
    """Attach the local timezone to naive datetimes; convert aware ones."""
    return value.astimezone()


def _local_midnight(now: Optional[datetime] = None) -> datetime:
    """Naive local wall-clock midnight of the day containing ``now``"""
    current = as_local(now) if now is not None else local_now()
    return current.replace(tzinfo=None, hour=0, minute=0, second=0, microsecond=0)


def start_of_day(now: Optional[datetime] = None) -> datetime:
    """Local midnight of the calendar day containing ``now``, with midnight's own UTC offset"""
    return _local_midnight(now).astimezone()


def start_of_rolling_week(now: Optional[datetime] = None) -> datetime:
    """Start of today minus seven days (a rolling window, not a calendar week)"""
    return (_local_midnight(now) - timedelta(days=7)).astimezone()
