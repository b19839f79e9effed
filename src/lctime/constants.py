"""Shared constants for lctime.

This module provides centralized configuration constants used across the
runtime and localization packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for composite directive expansion
- Cache limits: Memory bounds for caching subsystems
- POSIX locale: Vocabulary of the built-in "C" locale record
- Numbering systems: CLDR digit tables used when building records from Babel

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_COMPOSITE_DEPTH",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    "MAX_TEMPLATE_CACHE_SIZE",
    # Numerals
    "ASCII_ZERO",
    "NUMBERING_SYSTEM_DIGITS",
    # POSIX locale
    "DEFAULT_LOCALE_CODE",
    "POSIX_SHORT_DAYS",
    "POSIX_DAYS",
    "POSIX_SHORT_MONTHS",
    "POSIX_MONTHS",
    "POSIX_AM_PM",
    "POSIX_DATE_TIME",
    "POSIX_DATE",
    "POSIX_TIME",
    "POSIX_TIME_AMPM",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# Composite directives (%c, %x, %X, %r) expand locale-supplied templates that
# may themselves contain composites (en_US "%X" -> "%r" -> "%I:%M:%S %p").
# Real locale data nests two or three levels. A template that references
# itself would otherwise recurse until RecursionError.
#
# ============================================================================

# Maximum nesting of composite directive expansion within one format call.
MAX_COMPOSITE_DEPTH: int = 32

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleRecord instances per registry.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# Maximum memoized template segmentations.
# Applications use a small, fixed set of format strings.
MAX_TEMPLATE_CACHE_SIZE: int = 512

# ============================================================================
# NUMERALS
# ============================================================================

# Padding glyph used when a locale has no digit table.
ASCII_ZERO: str = "0"

# CLDR numbering systems (numberingSystems.xml) with decimal digit tables.
# "latn" maps to the empty string: records use ASCII digits for it.
NUMBERING_SYSTEM_DIGITS: dict[str, str] = {
    "latn": "",
    "arab": "٠١٢٣٤٥٦٧٨٩",
    "arabext": "۰۱۲۳۴۵۶۷۸۹",
    "beng": "০১২৩৪৫৬৭৮৯",
    "deva": "०१२३४५६७८९",
    "gujr": "૦૧૨૩૪૫૬૭૮૯",
    "guru": "੦੧੨੩੪੫੬੭੮੯",
    "khmr": "០១២៣៤៥៦៧៨៩",
    "knda": "೦೧೨೩೪೫೬೭೮೯",
    "laoo": "໐໑໒໓໔໕໖໗໘໙",
    "mlym": "൦൧൨൩൪൫൬൭൮൯",
    "mymr": "၀၁၂၃၄၅၆၇၈၉",
    "orya": "୦୧୨୩୪୫୬୭୮୯",
    "tamldec": "௦௧௨௩௪௫௬௭௮௯",
    "telu": "౦౧౨౩౪౫౬౭౮౯",
    "thai": "๐๑๒๓๔๕๖๗๘๙",
    "tibt": "༠༡༢༣༤༥༦༧༨༩",
}

# ============================================================================
# POSIX LOCALE
# ============================================================================

# Code reported by the built-in POSIX record.
DEFAULT_LOCALE_CODE: str = "C"

POSIX_SHORT_DAYS: tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
POSIX_DAYS: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)
POSIX_SHORT_MONTHS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
POSIX_MONTHS: tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
POSIX_AM_PM: tuple[str, str] = ("AM", "PM")

# Composite templates of the POSIX locale (IEEE Std 1003.1, LC_TIME "C").
POSIX_DATE_TIME: str = "%a %b %e %H:%M:%S %Y"
POSIX_DATE: str = "%m/%d/%y"
POSIX_TIME: str = "%H:%M:%S"
POSIX_TIME_AMPM: str = "%I:%M:%S %p"
