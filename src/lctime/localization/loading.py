"""Locale loading infrastructure.

Provides the protocol for locale loaders and two implementations: JSON
locale files on disk, and records built from Babel's CLDR data.

Components:
    LocaleLoader - Protocol for resolving one normalized code (structural typing)
    PathLocaleLoader - JSON locale files with path-traversal prevention
    BabelLocaleLoader - Records generated from CLDR via Babel
    bundled_loader - PathLocaleLoader over the locale files shipped with lctime

Python 3.13+.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from lctime.diagnostics import LctimeError, LocaleDataError
from lctime.diagnostics.templates import ErrorTemplate
from lctime.locale_utils import get_babel_locale
from lctime.localization.cldr import record_from_babel
from lctime.runtime.record import LocaleRecord

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "LocaleCode",
    # Protocol
    "LocaleLoader",
    # Concrete loaders
    "PathLocaleLoader",
    "BabelLocaleLoader",
    "bundled_loader",
    # Constants
    "BUNDLED_LOCALES_DIR",
]

type LocaleCode = str
"""Normalized POSIX locale code (e.g., 'en_US', 'ar_EG', 'zh_Hant')."""

# Locale files shipped with the package
BUNDLED_LOCALES_DIR: Path = Path(__file__).resolve().parent.parent / "locales"


class LocaleLoader(Protocol):
    """Protocol for resolving a normalized locale code to a LocaleRecord.

    Implementations must provide a load() method. The registry calls it
    once per code in the fallback chain and caches the first hit.

    This is a Protocol (structural typing) rather than ABC to allow
    maximum flexibility for users implementing custom loaders.

    Example:
        >>> class DictLoader:
        ...     def __init__(self, records):
        ...         self.records = records
        ...     def load(self, locale: str) -> LocaleRecord:
        ...         return self.records[locale]
        ...
        >>> registry = LocaleRegistry([DictLoader({"xx": POSIX_LOCALE})])
    """

    def load(self, locale: LocaleCode) -> LocaleRecord:
        """Load the record for one normalized locale code.

        Args:
            locale: Normalized code (e.g., 'en_US')

        Returns:
            LocaleRecord for that code

        Raises:
            LookupError: If this loader does not know the code (KeyError
                and FileNotFoundError-derived lookups are both accepted)
            FileNotFoundError: If the backing file does not exist
        """


@dataclass(frozen=True, slots=True)
class PathLocaleLoader:
    """File system locale loader using path templates.

    Implements LocaleLoader for JSON locale files whose keys are
    ShortDays, Days, ShortMonths, Months, AMPM, Numbers, DateTime, Date,
    Time and TimeAMPM. Uses {locale} placeholder in path template for
    locale substitution.

    Security:
        Locale codes containing path separators or ".." are rejected.
        All resolved paths are validated against a fixed root directory.

    Example:
        >>> loader = PathLocaleLoader("locales/{locale}.json")
        >>> record = loader.load("en_US")
        # Loads from: locales/en_US.json

    Attributes:
        base_path: Path template with {locale} placeholder
        root_dir: Fixed root directory for path traversal validation.
                  Defaults to the static prefix of base_path.
    """

    base_path: str
    root_dir: str | None = None
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory and validate template at initialization.

        Raises:
            ValueError: If base_path does not contain {locale} placeholder
        """
        if "{locale}" not in self.base_path:
            msg = (
                f"base_path must contain '{{locale}}' placeholder for locale substitution, "
                f"got: '{self.base_path}'"
            )
            raise ValueError(msg)

        if self.root_dir is not None:
            resolved = Path(self.root_dir).resolve()
        else:
            # e.g., "locales/{locale}.json" -> "locales"
            static_prefix = self.base_path.split("{locale}")[0].rstrip("/\\")
            resolved = Path(static_prefix).resolve() if static_prefix else Path.cwd().resolve()
        object.__setattr__(self, "_resolved_root", resolved)

    @staticmethod
    def _validate_locale(locale: LocaleCode) -> None:
        """Reject locale codes that could escape the root directory.

        Raises:
            LctimeError: If locale contains unsafe path components
        """
        if not locale:
            raise LctimeError(ErrorTemplate.locale_path_invalid(locale, "empty code"))
        if ".." in locale:
            raise LctimeError(
                ErrorTemplate.locale_path_invalid(locale, "path traversal sequence")
            )
        if "/" in locale or "\\" in locale:
            raise LctimeError(ErrorTemplate.locale_path_invalid(locale, "path separator"))

    def path_for(self, locale: LocaleCode) -> Path:
        """Resolved file path for a locale code.

        Raises:
            LctimeError: If the code is unsafe or resolves outside root_dir
        """
        self._validate_locale(locale)
        path = Path(self.base_path.format(locale=locale)).resolve()
        if not path.is_relative_to(self._resolved_root):
            raise LctimeError(
                ErrorTemplate.locale_path_invalid(locale, "resolves outside root directory")
            )
        return path

    def load(self, locale: LocaleCode) -> LocaleRecord:
        """Read and decode one locale file.

        Raises:
            FileNotFoundError: If no file exists for the code
            LocaleDataError: If the file content is not a valid locale mapping
            LctimeError: If the code is unsafe
        """
        path = self.path_for(locale)
        with path.open(encoding="utf-8") as fp:
            try:
                data = json.load(fp)
            except json.JSONDecodeError as e:
                raise LocaleDataError(
                    ErrorTemplate.locale_data_invalid(path.name, f"not valid JSON ({e.msg})")
                ) from e
        if not isinstance(data, dict):
            raise LocaleDataError(
                ErrorTemplate.locale_data_invalid(path.name, "top level must be an object")
            )
        return LocaleRecord.from_mapping(data, name=locale)


@dataclass(frozen=True, slots=True)
class BabelLocaleLoader:
    """Locale loader generating records from Babel CLDR data.

    Covers every locale Babel knows. Composite templates are converted
    from CLDR patterns, so they approximate rather than reproduce the C
    library's LC_TIME data for the same locale.
    """

    def load(self, locale: LocaleCode) -> LocaleRecord:
        """Build a record for a locale known to Babel.

        Raises:
            LookupError: If Babel has no data for the code
        """
        from babel import UnknownLocaleError  # noqa: PLC0415

        try:
            babel_locale = get_babel_locale(locale)
        except (UnknownLocaleError, ValueError) as e:
            msg = f"Babel has no locale data for '{locale}': {e}"
            raise LookupError(msg) from e
        return record_from_babel(babel_locale)


def bundled_loader() -> PathLocaleLoader:
    """PathLocaleLoader over the JSON locale files shipped with lctime."""
    return PathLocaleLoader(
        str(BUNDLED_LOCALES_DIR / "{locale}.json"),
        root_dir=str(BUNDLED_LOCALES_DIR),
    )
