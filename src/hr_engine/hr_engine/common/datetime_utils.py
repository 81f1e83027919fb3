from __future__ import annotations

import calendar
from datetime import date, datetime, time, timezone, tzinfo
from typing import Optional, Union

DateLike = Union[str, date, datetime]
TimeLike = Union[str, time]


def parse_iso_date(value: DateLike) -> date:
    """Parse YYYY-MM-DD string into date.

    Also accepts full ISO timestamps (only the date part is kept) and
    date/datetime objects.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value.strip()[:10], "%Y-%m-%d").date()


def try_parse_iso_date(value: Optional[DateLike]) -> Optional[date]:
    if value is None or value == "":
        return None
    try:
        return parse_iso_date(value)
    except (TypeError, ValueError, AttributeError):
        return None


def parse_clock_time(value: TimeLike) -> time:
    """Parse HH:MM (or HH:MM:SS) into a naive time of day."""
    if isinstance(value, time):
        return value.replace(tzinfo=None)
    text = value.strip()
    fmt = "%H:%M:%S" if text.count(":") == 2 else "%H:%M"
    return datetime.strptime(text, fmt).time()


def try_parse_clock_time(value: Optional[TimeLike]) -> Optional[time]:
    if value is None or value == "":
        return None
    try:
        return parse_clock_time(value)
    except (TypeError, ValueError, AttributeError):
        return None


def minutes_since_midnight(value: time) -> int:
    return value.hour * 60 + value.minute


def at_offset(day: date, clock: time, tz: tzinfo) -> datetime:
    return datetime.combine(day, clock, tzinfo=tz)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)
