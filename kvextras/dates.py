"""Date parsing and display helpers.

Datetimes are treated as instants. Naive values are assumed to be local
time and every datetime returned here is timezone aware in local time.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

_ISO8601_MILLISECOND = "%Y-%m-%dT%H:%M:%S.%f%z"
_ISO8601_SECOND = "%Y-%m-%dT%H:%M:%S%z"
_ISO8601_YEAR_MONTH_DAY = "%Y-%m-%d"

# Tried in order by ``from_iso8601_string``.
PARSING_FORMATS = [_ISO8601_MILLISECOND, _ISO8601_SECOND, _ISO8601_YEAR_MONTH_DAY]

YESTERDAY = "Yesterday"
TODAY = "Today"
TOMORROW = "Tomorrow"


def _local(dt: datetime) -> datetime:
    return dt.astimezone()


# --- Parsing ---------------------------------------------------------------


def from_iso8601_string(date_string: str) -> Optional[datetime]:
    """Parse ``date_string`` or return ``None`` when no known format matches.

    Accepted: ``1937-11-23T15:30:00.023-0700``, ``1937-11-23T15:30:00-0700``
    and ``1937-11-23`` (local midnight).
    """

    for fmt in PARSING_FORMATS:
        try:
            parsed = datetime.strptime(date_string, fmt)
        except ValueError:
            continue
        return _local(parsed)
    return None


def from_milliseconds_since_1970(milliseconds: float) -> datetime:
    return datetime.fromtimestamp(milliseconds / 1000.0).astimezone()


def milliseconds_since_1970(dt: datetime) -> float:
    return float(round(_local(dt).timestamp() * 1000))


# --- Formatting ------------------------------------------------------------


def time_string(dt: datetime) -> str:
    """E.g. "3:30 PM"."""
    dt = _local(dt)
    return f"{dt.hour % 12 or 12}:{dt:%M %p}"


def date_and_time_string(dt: datetime) -> str:
    """E.g. "Nov 23, 1937, 3:30 PM"."""
    dt = _local(dt)
    return f"{dt:%b} {dt.day}, {dt.year}, {time_string(dt)}"


def full_date_string(dt: datetime) -> str:
    """E.g. "Tuesday, November 23, 1937"."""
    dt = _local(dt)
    return f"{dt:%A, %B} {dt.day}, {dt.year}"


def full_date_and_time_string(dt: datetime) -> str:
    """E.g. "Tuesday, November 23, 1937 at 3:30 PM"."""
    return f"{full_date_string(dt)} at {time_string(dt)}"


def iso8601_date_and_time_string(dt: datetime) -> str:
    """E.g. "1937-11-23T15:30:00-0700"."""
    return _local(dt).strftime(_ISO8601_SECOND)


def iso8601_millisecond_string(dt: datetime) -> str:
    """E.g. "1937-11-23T15:30:00.023-0700"."""
    dt = _local(dt)
    return f"{dt:%Y-%m-%dT%H:%M:%S}.{dt.microsecond // 1000:03d}{dt:%z}"


def iso8601_date_string(dt: datetime) -> str:
    """E.g. "1937-11-23"."""
    return _local(dt).strftime(_ISO8601_YEAR_MONTH_DAY)


def day_and_month_string(dt: datetime) -> str:
    """E.g. "Nov 23"."""
    dt = _local(dt)
    return f"{dt:%b} {dt.day}"


def relative_day_and_month_string(dt: datetime, now: Optional[datetime] = None) -> str:
    """``Today``, ``Yesterday``, ``Tomorrow`` or the month and day."""
    now = _local(now) if now is not None else datetime.now().astimezone()
    if is_same_day(dt, now - days(1)):
        return YESTERDAY
    if is_same_day(dt, now):
        return TODAY
    if is_same_day(dt, now + days(1)):
        return TOMORROW
    return day_and_month_string(dt)


def relative_day_and_time_string(dt: datetime, now: Optional[datetime] = None) -> str:
    """E.g. "Today, 3:30 PM"."""
    return "%s, %s" % (relative_day_and_month_string(dt, now), time_string(dt))


# --- Day helpers -----------------------------------------------------------


def is_same_day(first: datetime, second: datetime) -> bool:
    return _local(first).date() == _local(second).date()


def is_today(dt: datetime) -> bool:
    return is_same_day(dt, datetime.now().astimezone())


def start_of_day(dt: datetime) -> datetime:
    day = _local(dt).date()
    return datetime(day.year, day.month, day.day).astimezone()


def end_of_day(dt: datetime) -> datetime:
    """Start of the following day."""
    day = _local(dt).date() + timedelta(days=1)
    return datetime(day.year, day.month, day.day).astimezone()


# --- Intervals -------------------------------------------------------------


def seconds(count: int) -> timedelta:
    return timedelta(seconds=count)


def minutes(count: int) -> timedelta:
    return timedelta(minutes=count)


def hours(count: int) -> timedelta:
    return timedelta(hours=count)


def days(count: int) -> timedelta:
    return timedelta(days=count)


def weeks(count: int) -> timedelta:
    return timedelta(weeks=count)
