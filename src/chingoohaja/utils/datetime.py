# File: src/chingoohaja/utils/datetime.py
"""Timezone-aware datetime utilities.

Session timestamps are stored as aware UTC datetimes.
"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from chingoohaja.core.config import get_settings


def app_timezone() -> ZoneInfo:
    """Display timezone from settings (default Asia/Seoul)."""
    return ZoneInfo(get_settings().app_timezone)


def ensure_utc(value: datetime) -> datetime:
    """Normalize a datetime to aware UTC. Naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_local(value: datetime) -> datetime:
    """Convert a datetime to app local time for display."""
    return ensure_utc(value).astimezone(app_timezone())


def seconds_between(start: datetime, end: datetime) -> int:
    """Whole seconds from start to end, floored at zero."""
    delta = ensure_utc(end) - ensure_utc(start)
    return max(0, int(delta.total_seconds()))
