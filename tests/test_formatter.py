"""Tests for runtime/formatter.py: scanner, dispatcher, depth limiting.

Python 3.13+.
"""

import logging
from dataclasses import replace
from datetime import UTC, datetime

import pytest
from hypothesis import event, given

from lctime.enums import SegmentKind
from lctime.runtime import Segment, dispatch, scan, strftime
from lctime.runtime.record import POSIX_LOCALE, LocaleRecord
from tests.strategies import literal_text, locale_records, points_in_time, templates

REFERENCE = datetime(2006, 1, 2, 15, 4, 5, tzinfo=UTC)


class TestScan:
    """scan splits templates into literal and directive segments."""

    def test_empty(self) -> None:
        assert scan("") == ()

    def test_literal_only(self) -> None:
        assert scan("hello") == (Segment.literal("hello"),)

    def test_mixed(self) -> None:
        assert scan("%Y-%m") == (
            Segment.directive("%Y"),
            Segment.literal("-"),
            Segment.directive("%m"),
        )

    def test_trailing_percent_is_literal(self) -> None:
        assert [s.text for s in scan("%Y-%m-%d %")] == ["%Y", "-", "%m", "-", "%d", " %"]
        assert scan("%")[0].kind is SegmentKind.LITERAL

    def test_percent_percent_is_directive(self) -> None:
        assert scan("%%") == (Segment.directive("%%"),)

    def test_directive_takes_next_code_point(self) -> None:
        """A non-ASCII character after '%' forms an unknown directive."""
        assert scan("%é") == (Segment.directive("%é"),)

    def test_cached(self) -> None:
        assert scan("%H:%M") is scan("%H:%M")

    @given(template=templates())
    def test_segments_reassemble_template(self, template: str) -> None:
        segments = scan(template)
        event(f"segments={min(len(segments), 5)}")
        assert "".join(s.text for s in segments) == template

    @given(template=templates())
    def test_directive_segments_are_two_characters(self, template: str) -> None:
        for segment in scan(template):
            if segment.kind is SegmentKind.DIRECTIVE:
                assert len(segment.text) == 2
                assert segment.text[0] == "%"


class TestDispatch:
    def test_known(self) -> None:
        assert dispatch("%Y", REFERENCE, POSIX_LOCALE) == "2006"

    def test_unknown_passes_through(self) -> None:
        assert dispatch("%q", REFERENCE, POSIX_LOCALE) == "%q"

    def test_unknown_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="lctime.runtime.formatter"):
            dispatch("%q", REFERENCE, POSIX_LOCALE)
        assert "%q" in caplog.text

    def test_composite_without_guard(self) -> None:
        """Direct dispatch of a composite creates its own guard."""
        assert dispatch("%F", REFERENCE, POSIX_LOCALE) == "2006-01-02"


class TestStrftime:
    """End-to-end behavior of runtime.strftime."""

    def test_english_example(self) -> None:
        result = strftime("%a %b %d %Y %H:%M:%S", REFERENCE, POSIX_LOCALE)
        assert result == "Mon Jan 02 2006 15:04:05"

    def test_unknown_directive(self) -> None:
        assert strftime("%q", REFERENCE, POSIX_LOCALE) == "%q"

    def test_unknown_among_known(self) -> None:
        assert strftime("%Y%q%m", REFERENCE, POSIX_LOCALE) == "2006%q01"

    def test_percent_escape(self) -> None:
        assert strftime("%%", REFERENCE, POSIX_LOCALE) == "%"

    def test_percent_escape_then_letter(self) -> None:
        """'%%Y' is a literal percent followed by a literal Y."""
        assert strftime("%%Y", REFERENCE, POSIX_LOCALE) == "%Y"

    def test_trailing_percent(self) -> None:
        assert strftime("100%", REFERENCE, POSIX_LOCALE) == "100%"

    def test_accepts_plain_date(self) -> None:
        assert strftime("%F %T", REFERENCE.date(), POSIX_LOCALE) == "2006-01-02 00:00:00"

    @given(text=literal_text(), t=points_in_time(), locale=locale_records())
    def test_template_without_percent_is_identity(
        self, text: str, t: datetime, locale: LocaleRecord
    ) -> None:
        assert strftime(text, t, locale) == text

    @given(template=templates(), t=points_in_time(), locale=locale_records())
    def test_never_raises(self, template: str, t: datetime, locale: LocaleRecord) -> None:
        assert isinstance(strftime(template, t, locale), str)


class TestCompositeDepth:
    """Self-referencing composite templates are bounded."""

    def test_self_reference_emitted_verbatim(self) -> None:
        locale = replace(POSIX_LOCALE, date="%x")
        assert strftime("%x", REFERENCE, locale) == "%x"

    def test_self_reference_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        locale = replace(POSIX_LOCALE, date="[%x]", name="loop")
        with caplog.at_level(logging.WARNING, logger="lctime.runtime.formatter"):
            result = strftime("%Y %x", REFERENCE, locale)
        assert result == "2006 %x"
        assert "exceeded expansion depth" in caplog.text

    def test_mutual_reference(self) -> None:
        locale = replace(POSIX_LOCALE, date="%X", time="%x")
        assert strftime("%x|%X", REFERENCE, locale) == "%x|%X"

    def test_branching_reference_terminates(self) -> None:
        """'%x %x' must not expand exponentially."""
        locale = replace(POSIX_LOCALE, date="%x %x")
        assert strftime("%x", REFERENCE, locale) == "%x"

    def test_other_directives_still_render(self) -> None:
        locale = replace(POSIX_LOCALE, date="%x")
        assert strftime("%F %x %T", REFERENCE, locale) == "2006-01-02 %x 15:04:05"
