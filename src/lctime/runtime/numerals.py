"""Locale numeral translation and padding.

translate_number() renders a non-negative integer in a locale's digit
glyphs; pad() left-pads a rendered field to a fixed visible width. Every
numeric directive goes through both.

Widths are measured in code points, not bytes: a glyph such as '٥' is one
character even though it takes two bytes in UTF-8.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lctime.runtime.record import LocaleRecord

__all__ = ["pad", "pad_number", "translate_number"]


def translate_number(n: int, locale: LocaleRecord) -> str:
    """Render a non-negative integer with the locale's digit glyphs.

    Args:
        n: Value to render (must be >= 0)
        locale: Record supplying the digit table

    Returns:
        ASCII decimal when locale.numbers is empty, otherwise the glyphs
        of n's decimal digits, most significant first.

    Example:
        >>> translate_number(2006, POSIX_LOCALE)
        '2006'
        >>> arabic = replace(POSIX_LOCALE, numbers=tuple("٠١٢٣٤٥٦٧٨٩"))
        >>> translate_number(2006, arabic)
        '٢٠٠٦'
        >>> translate_number(0, arabic)
        '٠'
    """
    numbers = locale.numbers
    if not numbers:
        return str(n)
    if n == 0:
        return numbers[0]

    glyphs: list[str] = []
    while n > 0:
        n, digit = divmod(n, 10)
        glyphs.append(numbers[digit])
    return "".join(reversed(glyphs))


def pad(s: str, width: int, pad_glyph: str) -> str:
    """Left-pad s with copies of pad_glyph up to width characters.

    Never truncates: a string already at least width characters long is
    returned unchanged.

    Example:
        >>> pad("5", 2, "0")
        '05'
        >>> pad("123", 2, "0")
        '123'
    """
    missing = width - len(s)
    if missing <= 0:
        return s
    return pad_glyph * missing + s


def pad_number(n: int, width: int, locale: LocaleRecord) -> str:
    """Translate n and zero-pad it with the locale's zero glyph."""
    return pad(translate_number(n, locale), width, locale.zero_glyph)
