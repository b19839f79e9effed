"""Locale resolution: loaders, CLDR conversion, registry and default locale.

This layer sits outside the formatting core. It turns locale codes into
LocaleRecord values; the runtime never calls back into it.

Python 3.13+.
"""

from .cldr import cldr_to_strftime, record_from_babel
from .loading import (
    BUNDLED_LOCALES_DIR,
    BabelLocaleLoader,
    LocaleCode,
    LocaleLoader,
    PathLocaleLoader,
    bundled_loader,
)
from .registry import (
    LocaleRegistry,
    default_registry,
    get_default_locale,
    load_locale,
    resolve_locale,
    set_default_locale,
)

__all__ = [
    "BUNDLED_LOCALES_DIR",
    "BabelLocaleLoader",
    "LocaleCode",
    "LocaleLoader",
    "LocaleRegistry",
    "PathLocaleLoader",
    "bundled_loader",
    "cldr_to_strftime",
    "default_registry",
    "get_default_locale",
    "load_locale",
    "record_from_babel",
    "resolve_locale",
    "set_default_locale",
]
