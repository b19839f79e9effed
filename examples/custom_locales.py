"""Custom locale records and loaders.

Demonstrates the locale resolution layer:

1. A record built in code with dataclasses.replace
2. JSON locale files loaded through PathLocaleLoader
3. A registry combining custom files with Babel's CLDR data
4. Setting the process default locale once at startup

Python 3.13+.
"""

from __future__ import annotations

import json
import tempfile
from dataclasses import replace
from datetime import UTC, datetime
from pathlib import Path

from lctime import (
    POSIX_LOCALE,
    BabelLocaleLoader,
    LocaleNotFoundError,
    LocaleRegistry,
    PathLocaleLoader,
    get_system_locale,
    set_default_locale,
    strftime,
)

t = datetime(2024, 3, 5, 9, 30, tzinfo=UTC)


def example_1_record_in_code() -> None:
    """Example 1: Derive a record from POSIX_LOCALE."""
    print("=" * 60)
    print("Example 1: Record Built in Code")
    print("=" * 60)

    devanagari = replace(
        POSIX_LOCALE,
        numbers=tuple("०१२३४५६७८९"),
        date="%d-%m-%Y",
        name="en_DEVA",
    )
    print(strftime("%x %H:%M", t, devanagari))
    # Output: ०५-०३-२०२४ ०९:३०


def example_2_path_loader() -> None:
    """Example 2: JSON locale files from a directory."""
    print("\n" + "=" * 60)
    print("Example 2: PathLocaleLoader")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmpdir:
        data = POSIX_LOCALE.to_mapping() | {
            "Days": ["Dimanche", "Lundi", "Mardi", "Mercredi", "Jeudi", "Vendredi", "Samedi"],
            "Date": "%d/%m/%Y",
        }
        (Path(tmpdir) / "fr_CA.json").write_text(json.dumps(data), encoding="utf-8")

        loader = PathLocaleLoader(f"{tmpdir}/{{locale}}.json")
        record = loader.load("fr_CA")
        print(strftime("%A %x", t, record))
        # Output: Mardi 05/03/2024


def example_3_registry() -> None:
    """Example 3: Custom files first, CLDR second."""
    print("\n" + "=" * 60)
    print("Example 3: LocaleRegistry")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmpdir:
        data = POSIX_LOCALE.to_mapping() | {"Date": "%Y年%m月%d日"}
        (Path(tmpdir) / "ja.json").write_text(json.dumps(data), encoding="utf-8")

        registry = LocaleRegistry(
            [PathLocaleLoader(f"{tmpdir}/{{locale}}.json"), BabelLocaleLoader()]
        )

        # ja_JP is found in CLDR before the chain reaches the "ja" file
        print(strftime("%x", t, registry.load("ja-JP")))
        # "ja" alone resolves to the custom file
        print(strftime("%x", t, registry.load("ja")))
        # Output: 2024年03月05日

        try:
            registry.load("xx-YY")
        except LocaleNotFoundError as e:
            print(f"Not found, tried: {e.tried}")
            # Output: Not found, tried: ('xx_YY', 'xx')

        print(registry.cache_info())


def example_4_default_locale() -> None:
    """Example 4: Process default, set once."""
    print("\n" + "=" * 60)
    print("Example 4: Default Locale")
    print("=" * 60)

    code = get_system_locale()
    try:
        record = set_default_locale(code)
    except LocaleNotFoundError:
        record = set_default_locale("en_US")
    print(f"Default locale: {record.name}")
    print(strftime("%c", t))

    try:
        set_default_locale("de_DE")
    except RuntimeError as e:
        print(f"Second call rejected: {e}")


if __name__ == "__main__":
    example_1_record_in_code()
    example_2_path_loader()
    example_3_registry()
    example_4_default_locale()
