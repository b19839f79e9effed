"""Formatting runtime: locale records, numerals, directives and the scanner.

This package is the directive interpreter. It only consumes already
resolved LocaleRecord values; resolving locale codes lives in
lctime.localization.

Python 3.13+. Zero external dependencies.
"""

from .directives import DIRECTIVES, CompositeDirective
from .formatter import Segment, dispatch, scan, strftime
from .numerals import pad, pad_number, translate_number
from .record import POSIX_LOCALE, LocaleRecord

__all__ = [
    "DIRECTIVES",
    "POSIX_LOCALE",
    "CompositeDirective",
    "LocaleRecord",
    "Segment",
    "dispatch",
    "pad",
    "pad_number",
    "scan",
    "strftime",
    "translate_number",
]
