"""Tests for runtime/calendar.py and the Weekday/Month enums.

Python 3.13+.
"""

from datetime import UTC, date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lctime.enums import Month, Weekday
from lctime.runtime import calendar
from tests.strategies import naive_datetimes


class TestWeekday:
    """Weekday numbering follows tm_wday (Sunday=0)."""

    def test_of_sunday(self) -> None:
        assert Weekday.of(date(2024, 3, 3)) is Weekday.SUNDAY

    def test_of_monday(self) -> None:
        assert Weekday.of(date(2006, 1, 2)) is Weekday.MONDAY

    def test_iso_number_sunday_is_seven(self) -> None:
        assert Weekday.SUNDAY.iso_number == 7

    @pytest.mark.parametrize("day", list(Weekday)[1:])
    def test_iso_number_matches_value_except_sunday(self, day: Weekday) -> None:
        assert day.iso_number == int(day)

    @given(d=st.dates())
    def test_agrees_with_isoweekday(self, d: date) -> None:
        assert Weekday.of(d).iso_number == d.isoweekday()


class TestMonth:
    def test_index_is_zero_based(self) -> None:
        assert Month.JANUARY.index == 0
        assert Month.DECEMBER.index == 11

    def test_of(self) -> None:
        assert Month.of(date(2024, 7, 1)) is Month.JULY


class TestClockFields:
    """Hour, minute and second helpers."""

    @pytest.mark.parametrize(
        ("hour", "expected"), [(0, 12), (1, 1), (11, 11), (12, 12), (13, 1), (23, 11)]
    )
    def test_hour12(self, hour: int, expected: int) -> None:
        assert calendar.hour12(datetime(2024, 1, 1, hour)) == expected  # noqa: DTZ001

    def test_plain_date_is_midnight(self) -> None:
        """A date without time reads as 00:00:00."""
        d = date(2024, 1, 1)
        assert (calendar.hour(d), calendar.minute(d), calendar.second(d)) == (0, 0, 0)
        assert calendar.hour12(d) == 12

    def test_day_of_year_leap(self) -> None:
        assert calendar.day_of_year(date(2024, 12, 31)) == 366
        assert calendar.day_of_year(date(2023, 12, 31)) == 365


class TestWeekNumbers:
    """%U and %W week numbering."""

    def test_sunday_week_zero_before_first_sunday(self) -> None:
        """2005-01-01 is a Saturday, before the year's first Sunday."""
        assert calendar.sunday_week_number(date(2005, 1, 1)) == 0
        assert calendar.sunday_week_number(date(2005, 1, 2)) == 1

    def test_monday_week_zero_before_first_monday(self) -> None:
        """2006-01-01 is a Sunday; 2006-01-02 is the first Monday."""
        assert calendar.monday_week_number(date(2006, 1, 1)) == 0
        assert calendar.monday_week_number(date(2006, 1, 2)) == 1

    def test_year_starting_on_sunday(self) -> None:
        """2006-01-01 is a Sunday and starts Sunday-week 1."""
        assert calendar.sunday_week_number(date(2006, 1, 1)) == 1

    def test_week_53(self) -> None:
        """Leap year starting on Sunday reaches Sunday-week 53."""
        assert calendar.sunday_week_number(date(2012, 12, 30)) == 53

    @given(d=st.dates())
    def test_ranges(self, d: date) -> None:
        assert 0 <= calendar.sunday_week_number(d) <= 53
        assert 0 <= calendar.monday_week_number(d) <= 53

    @given(t=naive_datetimes(min_year=1000))
    def test_matches_datetime_strftime(self, t: datetime) -> None:
        assert calendar.sunday_week_number(t) == int(t.strftime("%U"))
        assert calendar.monday_week_number(t) == int(t.strftime("%W"))


class TestIsoWeek:
    """%V and %G come from the ISO 8601 calendar."""

    def test_iso_year_before_new_year(self) -> None:
        """2021-01-01 belongs to week 53 of 2020."""
        d = date(2021, 1, 1)
        assert calendar.iso_year(d) == 2020
        assert calendar.iso_week(d) == 53

    def test_iso_year_after_new_year(self) -> None:
        """2024-12-30 belongs to week 1 of 2025."""
        d = date(2024, 12, 30)
        assert calendar.iso_year(d) == 2025
        assert calendar.iso_week(d) == 1

    @given(d=st.dates())
    def test_fourth_of_january_is_week_one(self, d: date) -> None:
        assert calendar.iso_week(date(d.year, 1, 4)) == 1


class TestZone:
    """UTC offset and zone name."""

    def test_naive_offset_is_zero(self) -> None:
        assert calendar.utc_offset_minutes(datetime(2024, 1, 1)) == 0  # noqa: DTZ001

    def test_plain_date_offset_is_zero(self) -> None:
        assert calendar.utc_offset_minutes(date(2024, 1, 1)) == 0

    def test_negative_offset(self) -> None:
        tz = timezone(-timedelta(hours=4, minutes=30))
        assert calendar.utc_offset_minutes(datetime(2024, 1, 1, tzinfo=tz)) == -270

    def test_sub_minute_offset_truncated_toward_zero(self) -> None:
        tz = timezone(-timedelta(minutes=5, seconds=59))
        assert calendar.utc_offset_minutes(datetime(2024, 1, 1, tzinfo=tz)) == -5

    def test_zone_name_utc(self) -> None:
        assert calendar.zone_name(datetime(2024, 1, 1, tzinfo=UTC)) == "UTC"

    def test_zone_name_zoneinfo(self) -> None:
        try:
            berlin = ZoneInfo("Europe/Berlin")
        except ZoneInfoNotFoundError:
            pytest.skip("IANA time zone database not available")
        t = datetime(2024, 7, 1, 12, tzinfo=berlin)
        assert calendar.zone_name(t) == "CEST"

    def test_zone_name_naive_is_empty(self) -> None:
        assert calendar.zone_name(datetime(2024, 1, 1)) == ""  # noqa: DTZ001
        assert calendar.zone_name(date(2024, 1, 1)) == ""
