"""Build LocaleRecords from Babel CLDR data.

CLDR names (weekdays, months, day periods) map directly onto LocaleRecord
fields. Composite templates come from CLDR date/time patterns converted to
strftime directives by cldr_to_strftime():

    date       <- date_formats["short"]                (%x)
    time       <- time_formats["medium"]               (%X)
    date_time  <- datetime_formats["medium"] combining the medium date
                  and medium time patterns             (%c)
    time_ampm  <- datetime_skeletons["hms"]            (%r)

Digits come from the locale's default CLDR numbering system.

CLDR fields with no strftime equivalent (era, quarter, fractional seconds,
flexible day periods other than am/pm) are dropped from the converted
template. Fields with a near equivalent are mapped to it: "d" (unpadded
day) becomes %d, "k" (hour 1-24) becomes %H.

Thread-safe. Uses Babel CLDR patterns.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from lctime.constants import NUMBERING_SYSTEM_DIGITS, POSIX_TIME_AMPM
from lctime.runtime.record import LocaleRecord

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["cldr_to_strftime", "record_from_babel"]

logger = logging.getLogger(__name__)

# ==============================================================================
# CLDR PATTERN TOKENS
# ==============================================================================
#
# Keys are (letter, run length); a length of 0 matches any run not listed
# explicitly for that letter. None marks fields that are dropped.
#
# ==============================================================================

_CLDR_FIELD_MAP: dict[tuple[str, int], str | None] = {
    # Year
    ("y", 2): "%y",
    ("y", 0): "%Y",
    ("u", 0): "%Y",
    # Week-based year
    ("Y", 2): "%g",
    ("Y", 0): "%G",
    # Month (format and stand-alone context)
    ("M", 1): "%m",
    ("M", 2): "%m",
    ("M", 3): "%b",
    ("M", 0): "%B",
    ("L", 1): "%m",
    ("L", 2): "%m",
    ("L", 3): "%b",
    ("L", 0): "%B",
    # Day
    ("d", 0): "%d",
    ("D", 0): "%j",
    # Weekday
    ("E", 4): "%A",
    ("E", 0): "%a",
    ("c", 1): "%u",
    ("c", 2): "%u",
    ("c", 4): "%A",
    ("c", 0): "%a",
    ("e", 1): "%u",
    ("e", 2): "%u",
    ("e", 4): "%A",
    ("e", 0): "%a",
    # Week of year
    ("w", 0): "%V",
    # Period
    ("a", 0): "%p",
    ("b", 0): "%p",
    # Hour
    ("H", 0): "%H",
    ("k", 0): "%H",
    ("h", 0): "%I",
    ("K", 0): "%I",
    # Minute, second
    ("m", 0): "%M",
    ("s", 0): "%S",
    # Zone offsets
    ("Z", 0): "%z",
    ("x", 0): "%z",
    ("X", 0): "%z",
    ("O", 0): "%z",
    # Zone names
    ("z", 0): "%Z",
    ("v", 0): "%Z",
    ("V", 0): "%Z",
    # No strftime equivalent
    ("G", 0): None,
    ("Q", 0): None,
    ("q", 0): None,
    ("S", 0): None,
    ("A", 0): None,
    ("B", 0): None,
    ("W", 0): None,
    ("F", 0): None,
    ("g", 0): None,
    ("U", 0): None,
    ("r", 0): None,
}

# Splits "{1}, {0}" into ["", "{1}", ", ", "{0}", ""]
_DATETIME_PLACEHOLDER = re.compile(r"(\{[01]\})")


def _tokenize_cldr_pattern(pattern: str) -> list[tuple[str, bool]]:
    """Tokenize a CLDR pattern into (text, is_field) pairs.

    CLDR quote escaping rules:
    - Single quotes delimit literal text: 'at' produces "at"
    - Two consecutive single quotes '' produce a literal single quote
    - '' inside quoted text also produces a literal single quote

    Examples:
        "h 'o''clock' a" -> [("h", True), (" ", False), ("o'clock", False),
                             (" ", False), ("a", True)]
        "d.MM.yyyy" -> [("d", True), (".", False), ("MM", True),
                        (".", False), ("yyyy", True)]
    """
    tokens: list[tuple[str, bool]] = []
    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]

        if char == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                tokens.append(("'", False))
                i += 2
                continue

            i += 1  # Skip opening quote
            literal_chars: list[str] = []
            while i < n:
                if pattern[i] == "'":
                    if i + 1 < n and pattern[i + 1] == "'":
                        literal_chars.append("'")
                        i += 2
                    else:
                        i += 1
                        break
                else:
                    literal_chars.append(pattern[i])
                    i += 1

            if literal_chars:
                tokens.append(("".join(literal_chars), False))
            continue

        # Pattern fields are runs of one ASCII letter ("yyyy", "MM", "d")
        if char.isascii() and char.isalpha():
            j = i + 1
            while j < n and pattern[j] == char:
                j += 1
            tokens.append((pattern[i:j], True))
            i = j
            continue

        tokens.append((char, False))
        i += 1

    return tokens


def _convert_field(token: str) -> str | None:
    letter = token[0]
    mapped = _CLDR_FIELD_MAP.get((letter, len(token)))
    if mapped is None and (letter, len(token)) not in _CLDR_FIELD_MAP:
        mapped = _CLDR_FIELD_MAP.get((letter, 0))
    return mapped


def cldr_to_strftime(pattern: str) -> str:
    """Convert a CLDR date/time pattern to a strftime template.

    Literal text is escaped so that a '%' in the pattern stays literal.

    Args:
        pattern: CLDR pattern (e.g., "MMM d, y")

    Returns:
        strftime template (e.g., "%b %d, %Y")

    Example:
        >>> cldr_to_strftime("EEEE, d MMMM y")
        '%A, %d %B %Y'
        >>> cldr_to_strftime("h:mm:ss a")
        '%I:%M:%S %p'
        >>> cldr_to_strftime("HH 'Uhr' mm")
        '%H Uhr %M'
    """
    parts: list[str] = []
    for text, is_field in _tokenize_cldr_pattern(pattern):
        if not is_field:
            parts.append(text.replace("%", "%%"))
            continue
        mapped = _convert_field(text)
        if mapped is None:
            logger.debug("CLDR field %r has no strftime equivalent; dropped", text)
            continue
        parts.append(mapped)
    return "".join(parts)


def _combine_datetime(locale: Locale, date_template: str, time_template: str) -> str:
    # CLDR dateTimeFormat patterns use {0} for time and {1} for date
    datetime_pattern = str(locale.datetime_formats.get("medium") or "{1} {0}")
    parts: list[str] = []
    for chunk in _DATETIME_PLACEHOLDER.split(datetime_pattern):
        if chunk == "{0}":
            parts.append(time_template)
        elif chunk == "{1}":
            parts.append(date_template)
        else:
            parts.append(cldr_to_strftime(chunk))
    return "".join(parts)


def _numbering_digits(locale: Locale) -> tuple[str, ...]:
    system = locale.default_numbering_system
    digits = NUMBERING_SYSTEM_DIGITS.get(system)
    if digits is None:
        logger.debug(
            "Numbering system %r of locale %s has no digit table; using ASCII digits",
            system,
            locale,
        )
        return ()
    return tuple(digits)


def record_from_babel(locale: Locale) -> LocaleRecord:
    """Build a LocaleRecord from a Babel Locale.

    Args:
        locale: Parsed Babel Locale

    Returns:
        LocaleRecord named after the locale (e.g. "de_DE")

    Example:
        >>> from babel import Locale
        >>> record = record_from_babel(Locale.parse("de_DE"))
        >>> record.days[0]
        'Sonntag'
        >>> record.date
        '%d.%m.%y'
    """
    days = locale.days["format"]
    months = locale.months["format"]
    # Babel weekday keys count from Monday=0; records start on Sunday
    sunday_first = (6, 0, 1, 2, 3, 4, 5)

    am_pm = (locale.periods.get("am", "AM"), locale.periods.get("pm", "PM"))

    date_template = cldr_to_strftime(locale.date_formats["short"].pattern)
    time_template = cldr_to_strftime(locale.time_formats["medium"].pattern)
    medium_date = cldr_to_strftime(locale.date_formats["medium"].pattern)

    hms = locale.datetime_skeletons.get("hms")
    time_ampm = cldr_to_strftime(hms.pattern) if hms is not None else POSIX_TIME_AMPM

    return LocaleRecord(
        short_days=tuple(days["abbreviated"][i] for i in sunday_first),
        days=tuple(days["wide"][i] for i in sunday_first),
        short_months=tuple(months["abbreviated"][m] for m in range(1, 13)),
        months=tuple(months["wide"][m] for m in range(1, 13)),
        am_pm=am_pm,
        numbers=_numbering_digits(locale),
        date_time=_combine_datetime(locale, medium_date, time_template),
        date=date_template,
        time=time_template,
        time_ampm=time_ampm,
        name=str(locale),
    )
