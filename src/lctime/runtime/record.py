"""Immutable locale record consumed by the formatter.

A LocaleRecord bundles the calendar vocabulary of one locale: weekday and
month names, the AM/PM pair, numeral glyphs, and the composite templates
behind %c, %x, %X and %r. Records are created once by a loader and shared
freely between threads; the formatter never mutates them.

Array lengths (7/7/12/12/2/0-or-10) are the caller's responsibility and
are not validated.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from lctime.constants import (
    ASCII_ZERO,
    DEFAULT_LOCALE_CODE,
    POSIX_AM_PM,
    POSIX_DATE,
    POSIX_DATE_TIME,
    POSIX_DAYS,
    POSIX_MONTHS,
    POSIX_SHORT_DAYS,
    POSIX_SHORT_MONTHS,
    POSIX_TIME,
    POSIX_TIME_AMPM,
)
from lctime.diagnostics import LocaleDataError
from lctime.diagnostics.templates import ErrorTemplate
from lctime.enums import Month, Weekday

__all__ = ["POSIX_LOCALE", "LocaleRecord"]

# Locale file keys -> LocaleRecord field names
_SEQUENCE_KEYS: tuple[tuple[str, str], ...] = (
    ("ShortDays", "short_days"),
    ("Days", "days"),
    ("ShortMonths", "short_months"),
    ("Months", "months"),
    ("AMPM", "am_pm"),
    ("Numbers", "numbers"),
)
_TEMPLATE_KEYS: tuple[tuple[str, str], ...] = (
    ("DateTime", "date_time"),
    ("Date", "date"),
    ("Time", "time"),
    ("TimeAMPM", "time_ampm"),
)


@dataclass(frozen=True, slots=True)
class LocaleRecord:
    """Calendar vocabulary and composite templates for one locale.

    Attributes:
        short_days: Abbreviated weekday names, Sunday first
        days: Full weekday names, Sunday first
        short_months: Abbreviated month names, January first
        months: Full month names, January first
        am_pm: Ante-meridiem and post-meridiem labels
        numbers: Ten digit glyphs indexed by value, or empty for ASCII digits
        date_time: Template for %c
        date: Template for %x
        time: Template for %X
        time_ampm: Template for %r
        name: Locale code the record was loaded for (informational)
    """

    short_days: tuple[str, ...]
    days: tuple[str, ...]
    short_months: tuple[str, ...]
    months: tuple[str, ...]
    am_pm: tuple[str, ...]
    numbers: tuple[str, ...]
    date_time: str
    date: str
    time: str
    time_ampm: str
    name: str = ""

    def day_name(self, weekday: Weekday, *, abbreviated: bool = False) -> str:
        """Weekday name for %a (abbreviated) or %A."""
        names = self.short_days if abbreviated else self.days
        return names[weekday.index]

    def month_name(self, month: Month, *, abbreviated: bool = False) -> str:
        """Month name for %b (abbreviated) or %B."""
        names = self.short_months if abbreviated else self.months
        return names[month.index]

    def period(self, hour: int) -> str:
        """AM/PM label for an hour on the 24-hour clock."""
        return self.am_pm[0] if hour < 12 else self.am_pm[1]

    @property
    def zero_glyph(self) -> str:
        """Glyph used for zero padding: numbers[0], or '0' for ASCII digits."""
        return self.numbers[0] if self.numbers else ASCII_ZERO

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, name: str = "") -> LocaleRecord:
        """Build a record from a locale file mapping.

        Keys follow the locale file format: ShortDays, Days, ShortMonths,
        Months, AMPM, Numbers (sequences of strings) and DateTime, Date,
        Time, TimeAMPM (strings). Numbers may be missing or null for ASCII
        digits.

        Args:
            data: Decoded locale file (e.g. from json.load)
            name: Locale code to record on the result

        Returns:
            New LocaleRecord

        Raises:
            LocaleDataError: If a key is missing or has the wrong type

        Example:
            >>> rec = LocaleRecord.from_mapping(POSIX_LOCALE.to_mapping(), name="C")
            >>> rec == POSIX_LOCALE
            True
        """
        fields: dict[str, Any] = {"name": name}
        for key, attr in _SEQUENCE_KEYS:
            value = data.get(key)
            if value is None and key == "Numbers":
                value = ()
            fields[attr] = _string_tuple(key, value)
        for key, attr in _TEMPLATE_KEYS:
            value = data.get(key)
            if not isinstance(value, str):
                raise LocaleDataError(
                    ErrorTemplate.locale_data_invalid(key, _describe(value, "a string"))
                )
            fields[attr] = value
        return cls(**fields)

    def to_mapping(self) -> dict[str, Any]:
        """Inverse of from_mapping: the record in locale file form."""
        data: dict[str, Any] = {}
        for key, attr in (*_SEQUENCE_KEYS, *_TEMPLATE_KEYS):
            value = getattr(self, attr)
            data[key] = list(value) if isinstance(value, tuple) else value
        return data


def _string_tuple(key: str, value: object) -> tuple[str, ...]:
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise LocaleDataError(
            ErrorTemplate.locale_data_invalid(key, _describe(value, "a list of strings"))
        )
    if not all(isinstance(item, str) for item in value):
        raise LocaleDataError(
            ErrorTemplate.locale_data_invalid(key, "all entries must be strings")
        )
    return tuple(value)


def _describe(value: object, expected: str) -> str:
    if value is None:
        return "missing"
    return f"expected {expected}, got {type(value).__name__}"


POSIX_LOCALE: LocaleRecord = LocaleRecord(
    short_days=POSIX_SHORT_DAYS,
    days=POSIX_DAYS,
    short_months=POSIX_SHORT_MONTHS,
    months=POSIX_MONTHS,
    am_pm=POSIX_AM_PM,
    numbers=(),
    date_time=POSIX_DATE_TIME,
    date=POSIX_DATE,
    time=POSIX_TIME,
    time_ampm=POSIX_TIME_AMPM,
    name=DEFAULT_LOCALE_CODE,
)
"""Built-in POSIX "C" locale: English names, ASCII digits."""
