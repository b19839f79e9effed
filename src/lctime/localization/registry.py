"""Locale resolution with fallback chains and caching.

LocaleRegistry turns a locale code into a LocaleRecord by trying each code
of the fallback chain ("zh-Hant-TW" -> zh_Hant_TW, zh_Hant, zh) against each
loader in order. The first hit is cached under the normalized requested
code.

The module also owns the process default locale used when a caller passes
no locale. The default can be set once, before any formatting call reads
it; afterwards it is read-only.

Thread Safety:
    Cache and default-locale state are protected by RLock. Records are
    immutable and shared between threads without synchronization.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections import OrderedDict
from collections.abc import Iterable
from threading import RLock

from lctime.constants import MAX_LOCALE_CACHE_SIZE
from lctime.diagnostics import LocaleNotFoundError
from lctime.diagnostics.templates import ErrorTemplate
from lctime.locale_utils import POSIX_ALIASES, locale_fallback_chain
from lctime.localization.loading import BabelLocaleLoader, LocaleLoader, bundled_loader
from lctime.runtime.record import POSIX_LOCALE, LocaleRecord

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Registry
    "LocaleRegistry",
    "default_registry",
    "load_locale",
    # Process default
    "get_default_locale",
    "set_default_locale",
    "resolve_locale",
]

logger = logging.getLogger(__name__)

# Normalized codes are letters, digits and underscores only
_SAFE_CODE = re.compile(r"[A-Za-z0-9_]+")


class LocaleRegistry:
    """Resolves locale codes through an ordered list of loaders.

    Cache Management:
        Resolved records are kept in an LRU cache bounded by max_cache_size.
        - clear_cache(): Drop all cached records
        - cache_size(): Number of cached records
        - cache_info(): Detailed cache statistics

    Example:
        >>> registry = LocaleRegistry([bundled_loader(), BabelLocaleLoader()])
        >>> registry.load("ar-EG").numbers[5]
        '٥'
        >>> registry.load("de-AT").name  # not bundled; built from CLDR
        'de_AT'

    Attributes:
        loaders: Loaders tried in order for every code of the fallback chain
        max_cache_size: Maximum cached records
    """

    __slots__ = ("_cache", "_lock", "loaders", "max_cache_size")

    def __init__(
        self,
        loaders: Iterable[LocaleLoader],
        *,
        max_cache_size: int = MAX_LOCALE_CACHE_SIZE,
    ) -> None:
        self.loaders: tuple[LocaleLoader, ...] = tuple(loaders)
        self.max_cache_size = max_cache_size
        # OrderedDict provides LRU semantics with O(1) operations
        self._cache: OrderedDict[str, LocaleRecord] = OrderedDict()
        self._lock = RLock()

    def clear_cache(self) -> None:
        """Clear all cached records. Thread-safe via RLock."""
        with self._lock:
            self._cache.clear()

    def cache_size(self) -> int:
        """Current number of cached records."""
        with self._lock:
            return len(self._cache)

    def cache_info(self) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached records
            - max_size: Maximum cache size
            - locales: Tuple of cached locale codes (LRU order)
        """
        with self._lock:
            return {
                "size": len(self._cache),
                "max_size": self.max_cache_size,
                "locales": tuple(self._cache.keys()),
            }

    def load(self, locale_code: str) -> LocaleRecord:
        """Resolve a locale code to a LocaleRecord.

        "C" and "POSIX" (with any encoding suffix) resolve to POSIX_LOCALE.

        Args:
            locale_code: BCP-47 or POSIX locale code (e.g., 'en-US', 'ar_EG')

        Returns:
            Record for the most specific code of the fallback chain that any
            loader knows

        Raises:
            LocaleNotFoundError: If no loader knows any code of the chain
        """
        chain = tuple(
            code for code in locale_fallback_chain(locale_code) if _SAFE_CODE.fullmatch(code)
        )
        if not chain:
            raise LocaleNotFoundError(
                ErrorTemplate.locale_not_found(locale_code, chain),
                locale_code=locale_code,
                tried=chain,
            )

        cache_key = chain[0]
        if cache_key.lower() in POSIX_ALIASES:
            return POSIX_LOCALE

        with self._lock:
            if cache_key in self._cache:
                self._cache.move_to_end(cache_key)
                return self._cache[cache_key]

        record = self._resolve(locale_code, chain)

        # Double-check pattern: another thread may have resolved it meanwhile
        with self._lock:
            if cache_key in self._cache:
                return self._cache[cache_key]
            if len(self._cache) >= self.max_cache_size:
                self._cache.popitem(last=False)
            self._cache[cache_key] = record
            return record

    def _resolve(self, locale_code: str, chain: tuple[str, ...]) -> LocaleRecord:
        for candidate in chain:
            for loader in self.loaders:
                try:
                    record = loader.load(candidate)
                except (LookupError, FileNotFoundError) as e:
                    logger.debug("Loader %s has no locale '%s': %s", loader, candidate, e)
                    continue
                if candidate != chain[0]:
                    logger.warning(
                        "Locale '%s' not found; falling back to '%s'", locale_code, candidate
                    )
                return record

        raise LocaleNotFoundError(
            ErrorTemplate.locale_not_found(locale_code, chain),
            locale_code=locale_code,
            tried=chain,
        )


_DEFAULT_REGISTRY = LocaleRegistry((bundled_loader(), BabelLocaleLoader()))


def default_registry() -> LocaleRegistry:
    """Registry used by load_locale(): bundled locale files first, then Babel."""
    return _DEFAULT_REGISTRY


def load_locale(locale_code: str) -> LocaleRecord:
    """Resolve a locale code through the default registry.

    Raises:
        LocaleNotFoundError: If the code is unknown to every loader

    Example:
        >>> load_locale("en-US").days[1]
        'Monday'
    """
    return _DEFAULT_REGISTRY.load(locale_code)


# ----------------------------------------------------------------------------
# Process default locale
# ----------------------------------------------------------------------------

_default_lock = RLock()
_default_locale: LocaleRecord | None = None
_default_frozen: bool = False


def set_default_locale(locale: LocaleRecord | str) -> LocaleRecord:
    """Set the process default locale, once, at startup.

    Args:
        locale: Record, or code resolved through the default registry

    Returns:
        The record now used as default

    Raises:
        LocaleNotFoundError: If a code cannot be resolved
        RuntimeError: If the default was already set or already read

    Example:
        >>> record = set_default_locale(get_system_locale())
    """
    global _default_locale, _default_frozen  # noqa: PLW0603

    record = locale if isinstance(locale, LocaleRecord) else load_locale(locale)
    with _default_lock:
        if _default_frozen:
            msg = (
                "Default locale is read-only once set or used; "
                "call set_default_locale() once at startup or pass a locale explicitly"
            )
            raise RuntimeError(msg)
        _default_locale = record
        _default_frozen = True
    return record


def get_default_locale() -> LocaleRecord:
    """Process default locale; POSIX_LOCALE unless set_default_locale() ran.

    Reading the default freezes it.
    """
    global _default_frozen  # noqa: PLW0603

    with _default_lock:
        _default_frozen = True
        return _default_locale if _default_locale is not None else POSIX_LOCALE


def resolve_locale(locale: LocaleRecord | str | None) -> LocaleRecord:
    """Normalize the locale argument accepted by the convenience API.

    None selects the process default, a string is resolved through the
    default registry, and a record is returned unchanged.
    """
    if locale is None:
        return get_default_locale()
    if isinstance(locale, LocaleRecord):
        return locale
    return load_locale(locale)
