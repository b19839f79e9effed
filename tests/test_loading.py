"""Tests for localization/loading.py and the bundled locale files.

Python 3.13+.
"""

import json
from datetime import UTC, datetime
from pathlib import Path

import pytest

from lctime.diagnostics import DiagnosticCode, LctimeError, LocaleDataError
from lctime.localization.loading import (
    BUNDLED_LOCALES_DIR,
    BabelLocaleLoader,
    PathLocaleLoader,
    bundled_loader,
)
from lctime.runtime import strftime
from lctime.runtime.record import POSIX_LOCALE

REFERENCE = datetime(2006, 1, 2, 15, 4, 5, tzinfo=UTC)

BUNDLED = ("ar_EG", "de_DE", "en_US", "fa_IR", "fr_FR")


class TestBundledLocales:
    """Locale files shipped inside the package."""

    def test_directory_contents(self) -> None:
        assert {p.stem for p in BUNDLED_LOCALES_DIR.glob("*.json")} == set(BUNDLED)

    @pytest.mark.parametrize("code", BUNDLED)
    def test_shapes(self, code: str) -> None:
        record = bundled_loader().load(code)
        assert record.name == code
        assert len(record.short_days) == 7
        assert len(record.days) == 7
        assert len(record.short_months) == 12
        assert len(record.months) == 12
        assert len(record.am_pm) == 2
        assert len(record.numbers) in (0, 10)

    @pytest.mark.parametrize("code", BUNDLED)
    def test_every_composite_renders(self, code: str) -> None:
        record = bundled_loader().load(code)
        for template in ("%c", "%x", "%X", "%r"):
            assert "%" not in strftime(template, REFERENCE, record)

    def test_en_us_c(self) -> None:
        record = bundled_loader().load("en_US")
        assert strftime("%c", REFERENCE, record) == "Mon 02 Jan 2006 03:04:05 PM UTC"

    def test_de_de(self) -> None:
        record = bundled_loader().load("de_DE")
        assert strftime("%A, %x %X", REFERENCE, record) == "Montag, 02.01.2006 15:04:05"

    def test_fr_fr(self) -> None:
        record = bundled_loader().load("fr_FR")
        assert strftime("%A %e %B", REFERENCE, record) == "lundi  2 janvier"

    def test_ar_eg_digits(self) -> None:
        record = bundled_loader().load("ar_EG")
        assert strftime("%x", REFERENCE, record) == "٠٢/٠١/٢٠٠٦"
        assert strftime("%p", REFERENCE, record) == "م"

    def test_fa_ir_digits(self) -> None:
        record = bundled_loader().load("fa_IR")
        assert strftime("%Y", REFERENCE, record) == "۲۰۰۶"

    def test_unknown_code(self) -> None:
        with pytest.raises(FileNotFoundError):
            bundled_loader().load("xx_YY")


class TestPathLocaleLoader:
    """JSON locale files from a {locale} path template."""

    def test_requires_placeholder(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="placeholder"):
            PathLocaleLoader(str(tmp_path / "locale.json"))

    def test_loads_file(self, tmp_path: Path) -> None:
        data = POSIX_LOCALE.to_mapping() | {"Date": "%Y.%m.%d"}
        (tmp_path / "xx_YY.json").write_text(json.dumps(data), encoding="utf-8")
        loader = PathLocaleLoader(str(tmp_path / "{locale}.json"))
        record = loader.load("xx_YY")
        assert record.date == "%Y.%m.%d"
        assert record.name == "xx_YY"

    @pytest.mark.parametrize("code", ["../etc/passwd", "en/US", "en\\US", ""])
    def test_rejects_unsafe_codes(self, tmp_path: Path, code: str) -> None:
        loader = PathLocaleLoader(str(tmp_path / "{locale}.json"))
        with pytest.raises(LctimeError) as exc_info:
            loader.load(code)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.LOCALE_PATH_INVALID

    def test_rejects_path_outside_root(self, tmp_path: Path) -> None:
        root = tmp_path / "root"
        root.mkdir()
        loader = PathLocaleLoader(str(tmp_path / "{locale}.json"), root_dir=str(root))
        with pytest.raises(LctimeError, match="outside root"):
            loader.path_for("en_US")

    def test_malformed_json(self, tmp_path: Path) -> None:
        (tmp_path / "xx.json").write_text("{not json", encoding="utf-8")
        loader = PathLocaleLoader(str(tmp_path / "{locale}.json"))
        with pytest.raises(LocaleDataError, match="not valid JSON"):
            loader.load("xx")

    def test_top_level_not_object(self, tmp_path: Path) -> None:
        (tmp_path / "xx.json").write_text("[]", encoding="utf-8")
        loader = PathLocaleLoader(str(tmp_path / "{locale}.json"))
        with pytest.raises(LocaleDataError, match="top level"):
            loader.load("xx")

    def test_missing_file(self, tmp_path: Path) -> None:
        loader = PathLocaleLoader(str(tmp_path / "{locale}.json"))
        with pytest.raises(FileNotFoundError):
            loader.load("xx")


class TestBabelLocaleLoader:
    def test_known_locale(self) -> None:
        record = BabelLocaleLoader().load("en_US")
        assert record.days[0] == "Sunday"
        assert record.name == "en_US"

    def test_unknown_locale_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            BabelLocaleLoader().load("xx_YY")
