"""Numeral adapters built on the numeral translator.

Small conversions for callers that need locale digits outside a strftime
template:

    char_to_number("٧")                 -> 7
    format_number("2024", "ar_EG")       -> "٢٠٢٤"
    strfduration(timedelta(hours=2), "ar_EG") -> "١٢٠"

Unlike the formatting path these functions validate their input and raise
InvalidNumberError for anything that is not a number.

Python 3.13+.
"""

from __future__ import annotations

import re
import unicodedata
from datetime import timedelta

from lctime.diagnostics import InvalidNumberError
from lctime.diagnostics.templates import ErrorTemplate
from lctime.localization.registry import resolve_locale
from lctime.runtime.numerals import translate_number
from lctime.runtime.record import LocaleRecord

__all__ = ["char_to_number", "format_number", "strfduration"]

# Optional sign, then decimal digits of any script; no digit-group underscores
_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def char_to_number(char: str) -> int:
    """Value of one decimal digit character.

    Accepts a digit of any script, so glyphs produced by a locale's digit
    table convert back to their value.

    Args:
        char: A single character

    Returns:
        Digit value [0,9]

    Raises:
        InvalidNumberError: If char is not exactly one decimal digit

    Example:
        >>> char_to_number("7")
        7
        >>> char_to_number("٧")
        7
    """
    if not isinstance(char, str) or len(char) != 1:
        raise InvalidNumberError(ErrorTemplate.invalid_digit(repr(char)), input_value=char)
    try:
        return unicodedata.decimal(char)
    except ValueError as e:
        raise InvalidNumberError(ErrorTemplate.invalid_digit(char), input_value=char) from e


def _to_int(value: int | str) -> int:
    # bool is an int subclass but never a meaningful number here
    if isinstance(value, bool):
        raise InvalidNumberError(ErrorTemplate.invalid_number(repr(value)), input_value=value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_PATTERN.fullmatch(text) is None:
            raise InvalidNumberError(ErrorTemplate.invalid_number(value), input_value=value)
        return int(text)
    raise InvalidNumberError(ErrorTemplate.invalid_number(repr(value)), input_value=value)


def _signed(n: int, locale: LocaleRecord) -> str:
    if n < 0:
        return "-" + translate_number(-n, locale)
    return translate_number(n, locale)


def format_number(value: int | str, locale: LocaleRecord | str | None = None) -> str:
    """Render an integer, or a string holding one, in locale digits.

    Args:
        value: int, or decimal string (surrounding whitespace and a sign
            are accepted; digits of any script are read)
        locale: Record, locale code, or None for the process default

    Returns:
        The number in the locale's glyphs; negatives keep a leading '-'

    Raises:
        InvalidNumberError: If value is not an integer or numeric string
        LocaleNotFoundError: If a locale code cannot be resolved

    Example:
        >>> format_number("2024", "ar_EG")
        '٢٠٢٤'
        >>> format_number(-15, "fa_IR")
        '-۱۵'
    """
    return _signed(_to_int(value), resolve_locale(locale))


def strfduration(duration: timedelta, locale: LocaleRecord | str | None = None) -> str:
    """Render the whole minutes of a duration in locale digits.

    Partial minutes are truncated toward zero.

    Args:
        duration: Duration to render
        locale: Record, locale code, or None for the process default

    Returns:
        Minute count in the locale's glyphs

    Raises:
        InvalidNumberError: If duration is not a timedelta
        LocaleNotFoundError: If a locale code cannot be resolved

    Example:
        >>> strfduration(timedelta(hours=1, seconds=90), "ar_EG")
        '٦١'
        >>> strfduration(timedelta(minutes=90))
        '90'
    """
    if not isinstance(duration, timedelta):
        raise InvalidNumberError(
            ErrorTemplate.invalid_number(repr(duration)), input_value=duration
        )
    minutes = int(duration / timedelta(minutes=1))
    return _signed(minutes, resolve_locale(locale))
