"""Convenience entry points that resolve the locale argument.

lctime.runtime.strftime takes an explicit LocaleRecord. These wrappers
also accept a locale code or nothing (the process default), then delegate.

Python 3.13+.
"""

from __future__ import annotations

from lctime.localization.registry import load_locale, resolve_locale
from lctime.runtime import formatter
from lctime.runtime.calendar import PointInTime
from lctime.runtime.record import LocaleRecord

__all__ = ["strftime", "strftime_locale"]


def strftime(
    template: str,
    t: PointInTime,
    locale: LocaleRecord | str | None = None,
) -> str:
    """Format a point in time with a POSIX strftime template.

    Args:
        template: Format string (e.g. "%A %d %B %Y")
        t: datetime to render (a date is read as midnight)
        locale: Record, locale code, or None for the process default

    Returns:
        The rendered string

    Raises:
        LocaleNotFoundError: If a locale code cannot be resolved

    Example:
        >>> strftime("%A %e %B", datetime(2024, 3, 5), "fr_FR")
        'mardi  5 mars'
    """
    return formatter.strftime(template, t, resolve_locale(locale))


def strftime_locale(locale_code: str, template: str, t: PointInTime) -> str:
    """Resolve locale_code, then format.

    Raises:
        LocaleNotFoundError: If locale_code cannot be resolved
    """
    return formatter.strftime(template, t, load_locale(locale_code))
