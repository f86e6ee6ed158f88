# File: zentribe/models/common.py
"""
Timestamp helpers shared by the record factories and the processors.
"""

from datetime import datetime, tzinfo
from typing import Optional, Union


def parse_iso_datetime(value: Union[str, datetime, None]) -> Optional[datetime]:
    """
    Read an ISO 8601 timestamp or date from a persisted row.

    A trailing 'Z' means UTC. Values without an offset stay naive; use
    ensure_aware() to place them in a timezone. Returns None when the value
    is empty or unreadable.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value

    text = str(value).strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def ensure_aware(value: datetime, tz: tzinfo) -> datetime:
    """Interpret a naive datetime as wall-clock time in `tz` (a pytz zone)."""
    if value.tzinfo is not None:
        return value
    return tz.localize(value)
