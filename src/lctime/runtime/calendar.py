"""Calendar fields derived from a point in time.

Week numbering follows POSIX strftime:
    %U  Sunday-based week of the year; days before the first Sunday are week 0
    %W  Monday-based week of the year; days before the first Monday are week 0
    %V  ISO 8601 week number, the week containing 4 January is week 1
    %G  ISO 8601 week-numbering year (owner of the %V week)

A point in time is a datetime. Plain dates are accepted and read as
midnight with no UTC offset.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from lctime.enums import Weekday

__all__ = [
    "PointInTime",
    "day_of_year",
    "hour",
    "hour12",
    "iso_week",
    "iso_year",
    "minute",
    "monday_week_number",
    "second",
    "sunday_week_number",
    "utc_offset_minutes",
    "zone_name",
]

type PointInTime = date | datetime
"""Value accepted by the formatter: datetime, or date read as midnight."""


def day_of_year(t: PointInTime) -> int:
    """Day of the year [1,366]."""
    return t.timetuple().tm_yday


def hour(t: PointInTime) -> int:
    """Hour on the 24-hour clock [0,23]."""
    return t.hour if isinstance(t, datetime) else 0


def hour12(t: PointInTime) -> int:
    """Hour on the 12-hour clock [1,12]."""
    return hour(t) % 12 or 12


def minute(t: PointInTime) -> int:
    return t.minute if isinstance(t, datetime) else 0


def second(t: PointInTime) -> int:
    return t.second if isinstance(t, datetime) else 0


def iso_year(t: PointInTime) -> int:
    """ISO 8601 week-numbering year.

    Differs from t.year for dates in the last ISO week of the previous year
    (early January) or the first ISO week of the next year (late December).

    Example:
        >>> iso_year(date(2021, 1, 1))
        2020
        >>> iso_year(date(2024, 12, 30))
        2025
    """
    return t.isocalendar().year


def iso_week(t: PointInTime) -> int:
    """ISO 8601 week number [1,53]."""
    return t.isocalendar().week


def sunday_week_number(t: PointInTime) -> int:
    """Week of the year [0,53] with weeks starting on Sunday.

    The first Sunday of January starts week 1; earlier days are week 0.
    """
    yday = day_of_year(t) - 1
    wday = Weekday.of(t).index
    return (yday + 7 - wday) // 7


def monday_week_number(t: PointInTime) -> int:
    """Week of the year [0,53] with weeks starting on Monday.

    The first Monday of January starts week 1; earlier days are week 0.
    """
    yday = day_of_year(t) - 1
    days_since_monday = (Weekday.of(t).index + 6) % 7
    return (yday + 7 - days_since_monday) // 7


def utc_offset_minutes(t: PointInTime) -> int:
    """Signed UTC offset in whole minutes; 0 for naive values.

    Seconds beyond the minute are truncated toward zero.
    """
    if not isinstance(t, datetime):
        return 0
    offset = t.utcoffset()
    if offset is None:
        return 0
    return int(offset / timedelta(minutes=1))


def zone_name(t: PointInTime) -> str:
    """Timezone abbreviation, or the empty string when unknown."""
    if not isinstance(t, datetime):
        return ""
    return t.tzname() or ""
