"""
Local-calendar date helpers.

Log keys and calendar-day keys are both local ``YYYY-MM-DD`` strings. A
timestamp's calendar day is read in the offset it was written with, never
converted to UTC or to the server's zone first: a member's day must not
depend on where the API happens to run.
"""

from datetime import date, datetime, timedelta
from typing import Optional, Union


def to_local_iso_date(value: Union[date, datetime]) -> str:
    """Format a date (or the calendar day of a datetime in its own offset) as YYYY-MM-DD."""
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def parse_local_date(value: Union[str, date, datetime]) -> date:
    """
    Resolve a stored date value to a calendar day.

    Accepts plain ``YYYY-MM-DD`` strings, naive or aware ISO timestamps
    (a trailing ``Z`` included) and date/datetime objects. Aware timestamps
    keep their own offset; the day is the wall-clock day they name.

    Raises:
        ValueError: if the string is not an ISO date or timestamp
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = value.strip()
    if len(text) == 10:
        return date.fromisoformat(text)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text).date()


def weekday_index(day: date) -> int:
    """Monday-based weekday index (0=Monday, 6=Sunday)."""
    return day.weekday()


def add_days(day: date, days: int) -> date:
    return day + timedelta(days=days)


def local_today(now: Optional[datetime] = None) -> date:
    """Calendar day of ``now`` in its own offset; the host's date when omitted."""
    if now is None:
        return date.today()
    return parse_local_date(now)
