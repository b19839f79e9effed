"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale code normalization used by the loaders and the registry
cache. Provides canonical locale handling to ensure consistent cache keys,
file names and Babel lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from lctime.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "POSIX_ALIASES",
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "locale_fallback_chain",
    "normalize_locale",
]

# Normalized codes naming the built-in POSIX record
POSIX_ALIASES: frozenset[str] = frozenset({"c", "posix"})


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 or POSIX locale code to canonical POSIX form.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Encoding (".UTF-8") and modifier ("@euro") suffixes are dropped. Case is
    canonicalized so that "EN-us" and "en_US" share one cache entry:
    language lowercase, script titlecase, territory uppercase.

    This is the canonical normalization function. All locale handling should
    normalize at the system boundary (entry point) using this function, then
    use the normalized form for cache keys and lookups.

    Args:
        locale_code: BCP-47 or POSIX locale code (e.g., "en-US", "ar_EG.UTF-8")

    Returns:
        Canonical POSIX code (e.g., "en_US", "ar_EG"); empty for empty input

    Example:
        >>> normalize_locale("en-us")
        'en_US'
        >>> normalize_locale("zh-hant-tw")
        'zh_Hant_TW'
        >>> normalize_locale("de_DE.UTF-8@euro")
        'de_DE'
    """
    code = locale_code.strip().split(".", 1)[0].split("@", 1)[0]
    parts = [part for part in code.replace("-", "_").split("_") if part]
    if not parts:
        return ""

    canonical = [parts[0].lower()]
    for part in parts[1:]:
        if len(part) == 4 and part.isalpha():
            canonical.append(part.title())
        elif (len(part) == 2 and part.isalpha()) or (len(part) == 3 and part.isdigit()):
            canonical.append(part.upper())
        else:
            canonical.append(part)
    return "_".join(canonical)


def locale_fallback_chain(locale_code: str) -> tuple[str, ...]:
    """Normalized codes to try for a locale, most specific first.

    Example:
        >>> locale_fallback_chain("zh-Hant-TW")
        ('zh_Hant_TW', 'zh_Hant', 'zh')
        >>> locale_fallback_chain("")
        ()
    """
    normalized = normalize_locale(locale_code)
    if not normalized:
        return ()
    parts = normalized.split("_")
    return tuple("_".join(parts[:end]) for end in range(len(parts), 0, -1))


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.language
        'en'
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the Babel Locale cache used by get_babel_locale()."""
    get_babel_locale.cache_clear()


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() for LC_TIME (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_TIME environment variable (controls date formatting)
    4. LANG environment variable (default locale)

    Normalizes the result to POSIX format. Filters out "C" and "POSIX"
    pseudo-locales.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en_US" as fallback.

    Returns:
        Detected locale code in POSIX format.
        Returns "en_US" if not determinable and raise_on_failure is False.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    Example:
        >>> import os
        >>> os.environ['LC_TIME'] = 'ar_EG.UTF-8'
        >>> get_system_locale()
        'ar_EG'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale(locale_module.LC_TIME)
        if system_locale and normalize_locale(system_locale) not in POSIX_ALIASES:
            return normalize_locale(system_locale)
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_TIME", "LANG"):
        value = os.environ.get(var)
        if value and normalize_locale(value) not in (*POSIX_ALIASES, ""):
            return normalize_locale(value)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_TIME, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return "en_US"
