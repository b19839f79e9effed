"""Field renderers for strftime directives.

The following directives are based on The Open Group Base Specifications
Issue 7 strftime man page:
http://pubs.opengroup.org/onlinepubs/9699919799/functions/strftime.html

Each renderer is a pure function of (t, locale). Composite directives are
not rendered here: they are CompositeDirective entries naming the
sub-template, and the formatter expands them by re-entering the scanner.

DIRECTIVES maps the two-character code ("%d", "%%") to its entry. New
directives extend the table.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: N802 - renderer names mirror case-sensitive directive letters
from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from lctime.enums import Month, Weekday
from lctime.runtime import calendar
from lctime.runtime.calendar import PointInTime
from lctime.runtime.numerals import pad_number, translate_number
from lctime.runtime.record import LocaleRecord

__all__ = [
    "DIRECTIVES",
    "CompositeDirective",
    "DirectiveEntry",
    "Renderer",
]

type Renderer = Callable[[PointInTime, LocaleRecord], str]
"""Renders one calendar field or literal."""


@dataclass(frozen=True, slots=True)
class CompositeDirective:
    """Directive defined by expanding a sub-template.

    Attributes:
        template: Returns the sub-template for a locale (constant for
            %D %F %R %T, a locale field for %c %r %x %X)
    """

    template: Callable[[LocaleRecord], str]

    @classmethod
    def fixed(cls, template: str) -> CompositeDirective:
        """Composite with the same sub-template in every locale."""
        return cls(lambda _locale: template)


type DirectiveEntry = Renderer | CompositeDirective


# ----------------------------------------------------------------------------
# Names
# ----------------------------------------------------------------------------


def per_a(t: PointInTime, locale: LocaleRecord) -> str:
    """Locale's abbreviated weekday name."""
    return locale.day_name(Weekday.of(t), abbreviated=True)


def per_A(t: PointInTime, locale: LocaleRecord) -> str:
    """Locale's full weekday name."""
    return locale.day_name(Weekday.of(t))


def per_b(t: PointInTime, locale: LocaleRecord) -> str:
    """Locale's abbreviated month name."""
    return locale.month_name(Month.of(t), abbreviated=True)


def per_B(t: PointInTime, locale: LocaleRecord) -> str:
    """Locale's full month name."""
    return locale.month_name(Month.of(t))


def per_p(t: PointInTime, locale: LocaleRecord) -> str:
    """Locale's equivalent of either a.m. or p.m."""
    return locale.period(calendar.hour(t))


# ----------------------------------------------------------------------------
# Zero-padded numbers
# ----------------------------------------------------------------------------


def per_C(t: PointInTime, locale: LocaleRecord) -> str:
    """Year divided by 100 and truncated to an integer [00,99]."""
    return pad_number(t.year // 100, 2, locale)


def per_d(t: PointInTime, locale: LocaleRecord) -> str:
    """Day of the month [01,31]."""
    return pad_number(t.day, 2, locale)


def per_g(t: PointInTime, locale: LocaleRecord) -> str:
    """Last 2 digits of the week-based year [00,99]."""
    return pad_number(calendar.iso_year(t) % 100, 2, locale)


def per_G(t: PointInTime, locale: LocaleRecord) -> str:
    """Week-based year (for example, 1977)."""
    return pad_number(calendar.iso_year(t), 2, locale)


def per_H(t: PointInTime, locale: LocaleRecord) -> str:
    """Hour (24-hour clock) [00,23]."""
    return pad_number(calendar.hour(t), 2, locale)


def per_I(t: PointInTime, locale: LocaleRecord) -> str:
    """Hour (12-hour clock) [01,12]."""
    return pad_number(calendar.hour12(t), 2, locale)


def per_j(t: PointInTime, locale: LocaleRecord) -> str:
    """Day of the year [001,366]."""
    return pad_number(calendar.day_of_year(t), 3, locale)


def per_m(t: PointInTime, locale: LocaleRecord) -> str:
    """Month [01,12]."""
    return pad_number(t.month, 2, locale)


def per_M(t: PointInTime, locale: LocaleRecord) -> str:
    """Minute [00,59]."""
    return pad_number(calendar.minute(t), 2, locale)


def per_S(t: PointInTime, locale: LocaleRecord) -> str:
    """Second [00,60]."""
    return pad_number(calendar.second(t), 2, locale)


def per_U(t: PointInTime, locale: LocaleRecord) -> str:
    """Week number of the year [00,53], Sunday as the first day of the week.

    The first Sunday of January is the first day of week 1; days in the
    new year before this are in week 0.
    """
    return pad_number(calendar.sunday_week_number(t), 2, locale)


def per_V(t: PointInTime, locale: LocaleRecord) -> str:
    """ISO 8601 week number [01,53].

    If the week containing 1 January has four or more days in the new
    year, it is week 1. Otherwise it is the last week of the previous year.
    Both 4 January and the first Thursday of January are always in week 1.
    """
    return pad_number(calendar.iso_week(t), 2, locale)


def per_W(t: PointInTime, locale: LocaleRecord) -> str:
    """Week number of the year [00,53], Monday as the first day of the week.

    The first Monday of January is the first day of week 1; days in the
    new year before this are in week 0.
    """
    return pad_number(calendar.monday_week_number(t), 2, locale)


def per_y(t: PointInTime, locale: LocaleRecord) -> str:
    """Last two digits of the year [00,99]."""
    return pad_number(t.year % 100, 2, locale)


# ----------------------------------------------------------------------------
# Unpadded numbers
# ----------------------------------------------------------------------------


def per_e(t: PointInTime, locale: LocaleRecord) -> str:
    """Day of the month [1,31]; a single digit is preceded by a space."""
    day = translate_number(t.day, locale)
    return f" {day}" if t.day < 10 else day


def per_u(t: PointInTime, locale: LocaleRecord) -> str:
    """Weekday [1,7], with 1 representing Monday."""
    return translate_number(Weekday.of(t).iso_number, locale)


def per_w(t: PointInTime, locale: LocaleRecord) -> str:
    """Weekday [0,6], with 0 representing Sunday."""
    return translate_number(Weekday.of(t).index, locale)


def per_Y(t: PointInTime, locale: LocaleRecord) -> str:
    """Year (for example, 1997)."""
    return translate_number(t.year, locale)


# ----------------------------------------------------------------------------
# Time zone
# ----------------------------------------------------------------------------


def per_z(t: PointInTime, locale: LocaleRecord) -> str:
    """Offset from UTC in the ISO 8601 basic format (+hhmm or -hhmm).

    For example, "-0430" means 4 hours 30 minutes behind UTC. Naive values
    render as "+0000". Digits are always ASCII.
    """
    offset = calendar.utc_offset_minutes(t)
    sign = "-" if offset < 0 else "+"
    hours, minutes = divmod(abs(offset), 60)
    return f"{sign}{hours:02d}{minutes:02d}"


def per_Z(t: PointInTime, locale: LocaleRecord) -> str:
    """Timezone name or abbreviation, or nothing if no zone is known."""
    return calendar.zone_name(t)


# ----------------------------------------------------------------------------
# Literals
# ----------------------------------------------------------------------------


def per_n(t: PointInTime, locale: LocaleRecord) -> str:
    return "\n"


def per_t(t: PointInTime, locale: LocaleRecord) -> str:
    return "\t"


def per_percent(t: PointInTime, locale: LocaleRecord) -> str:
    return "%"


DIRECTIVES: Mapping[str, DirectiveEntry] = MappingProxyType({
    "%a": per_a,
    "%A": per_A,
    "%b": per_b,
    "%B": per_B,
    "%c": CompositeDirective(lambda locale: locale.date_time),
    "%C": per_C,
    "%d": per_d,
    "%D": CompositeDirective.fixed("%m/%d/%y"),
    "%e": per_e,
    "%F": CompositeDirective.fixed("%Y-%m-%d"),
    "%g": per_g,
    "%G": per_G,
    "%H": per_H,
    "%I": per_I,
    "%j": per_j,
    "%m": per_m,
    "%M": per_M,
    "%n": per_n,
    "%p": per_p,
    "%r": CompositeDirective(lambda locale: locale.time_ampm),
    "%R": CompositeDirective.fixed("%H:%M"),
    "%S": per_S,
    "%t": per_t,
    "%T": CompositeDirective.fixed("%H:%M:%S"),
    "%u": per_u,
    "%U": per_U,
    "%V": per_V,
    "%w": per_w,
    "%W": per_W,
    "%x": CompositeDirective(lambda locale: locale.date),
    "%X": CompositeDirective(lambda locale: locale.time),
    "%y": per_y,
    "%Y": per_Y,
    "%z": per_z,
    "%Z": per_Z,
    "%%": per_percent,
})
"""Directive code -> renderer or composite sub-template."""
