"""Enumerations for lctime type-safe constants.

Weekday and Month are IntEnums so they can be compared with plain calendar
integers, while name lookup in LocaleRecord goes through them instead of raw
array indices. SegmentKind is a StrEnum: str(SegmentKind.LITERAL) == "literal".

Python 3.13+.
"""

from __future__ import annotations

from datetime import date
from enum import IntEnum, StrEnum


class Weekday(IntEnum):
    """Day of the week, numbered like POSIX tm_wday (Sunday=0)."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of(cls, value: date) -> Weekday:
        """Weekday of a date or datetime.

        Python's date.weekday() counts from Monday=0; this shifts it so
        that Sunday=0.
        """
        return cls((value.weekday() + 1) % 7)

    @property
    def iso_number(self) -> int:
        """ISO 8601 weekday number [1,7], Monday=1 and Sunday=7."""
        return 7 if self is Weekday.SUNDAY else int(self)

    @property
    def index(self) -> int:
        """Index into Sunday-first name tables."""
        return int(self)


class Month(IntEnum):
    """Month of the year, numbered like datetime.month (January=1)."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def of(cls, value: date) -> Month:
        """Month of a date or datetime."""
        return cls(value.month)

    @property
    def index(self) -> int:
        """Index into January-first name tables (January=0)."""
        return int(self) - 1


class SegmentKind(StrEnum):
    """Kind of a scanned template segment.

    StrEnum provides automatic string conversion: str(SegmentKind.DIRECTIVE) == "directive"
    """

    LITERAL = "literal"
    """Text copied to the output unchanged."""

    DIRECTIVE = "directive"
    """Two-character code introduced by '%'."""


__all__ = [
    "Month",
    "SegmentKind",
    "Weekday",
]
