"""lctime - Locale-aware strftime.

Formats datetimes with POSIX strftime templates using a locale's calendar
vocabulary: weekday and month names, AM/PM markers, digit glyphs and the
composite templates behind %c, %x, %X and %r.

Public API:
    strftime - Format with a LocaleRecord, a locale code, or the default locale
    strftime_locale - Resolve a locale code, then format
    LocaleRecord - Immutable calendar vocabulary for one locale
    POSIX_LOCALE - Built-in "C" locale record
    load_locale - Resolve a locale code (bundled files, then Babel CLDR)
    LocaleRegistry / PathLocaleLoader / BabelLocaleLoader - Custom resolution
    set_default_locale / get_default_locale - Process default, set once
    char_to_number / format_number / strfduration - Numeral adapters

Exceptions:
    LctimeError - Base exception class
    LocaleNotFoundError - Locale code could not be resolved
    LocaleDataError - Locale file content is malformed
    InvalidNumberError - Numeral adapter received non-numeric input

Submodules:
    lctime.runtime - Scanner, dispatcher, field renderers, numerals
    lctime.localization - Loaders, CLDR conversion, registry
    lctime.diagnostics - Error types and diagnostic codes
"""

from .diagnostics import (
    InvalidNumberError,
    LctimeError,
    LocaleDataError,
    LocaleNotFoundError,
)
from .enums import Month, SegmentKind, Weekday
from .formatting import strftime, strftime_locale
from .locale_utils import get_system_locale, normalize_locale
from .localization import (
    BabelLocaleLoader,
    LocaleRegistry,
    PathLocaleLoader,
    get_default_locale,
    load_locale,
    set_default_locale,
)
from .runtime import POSIX_LOCALE, LocaleRecord, Segment
from .runtime.functions import char_to_number, format_number, strfduration

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("lctime")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "POSIX_LOCALE",
    "BabelLocaleLoader",
    "InvalidNumberError",
    "LctimeError",
    "LocaleDataError",
    "LocaleNotFoundError",
    "LocaleRecord",
    "LocaleRegistry",
    "Month",
    "PathLocaleLoader",
    "Segment",
    "SegmentKind",
    "Weekday",
    "__version__",
    "char_to_number",
    "format_number",
    "get_default_locale",
    "get_system_locale",
    "load_locale",
    "normalize_locale",
    "set_default_locale",
    "strfduration",
    "strftime",
    "strftime_locale",
]
