# core/date_utils.py
import math
from datetime import datetime, timezone
from typing import Optional, Union

DateInput = Union[str, datetime, None]


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive UTC; naive values are assumed UTC already."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def to_utc_iso(value: datetime) -> str:
    """ISO-8601 with an explicit Z, treating naive values as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _coerce(value: DateInput) -> Optional[datetime]:
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    try:
        # Handle both ISO format with and without timezone
        if value.endswith("Z"):
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        return datetime.fromisoformat(value)
    except (AttributeError, TypeError, ValueError):
        return None


def format_date(value: DateInput) -> str:
    """Render a date as DD/MM/YYYY, or an empty string when it can't be parsed."""
    parsed = _coerce(value)
    if parsed is None:
        return ""
    return parsed.strftime("%d/%m/%Y")


def format_datetime(value: DateInput) -> str:
    """Render a date as DD/MM/YYYY HH:MM, or an empty string when it can't be parsed."""
    parsed = _coerce(value)
    if parsed is None:
        return ""
    return parsed.strftime("%d/%m/%Y %H:%M")


def days_until(due: Optional[datetime], now: Optional[datetime] = None) -> int:
    """
    Whole days from `now` until `due`, rounded up.
    Negative once the date has passed, 0 when there is no due date.
    """
    if due is None:
        return 0
    now = to_naive_utc(now) or datetime.utcnow()
    seconds = (to_naive_utc(due) - now).total_seconds()
    return math.ceil(seconds / 86400)


def due_priority(due: Optional[datetime], now: Optional[datetime] = None) -> str:
    days = days_until(due, now)
    if days <= 1:
        return "high"
    if days <= 7:
        return "medium"
    return "low"
