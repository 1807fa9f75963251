"""Tests for ISO 8601 formatting and week dates."""

import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from utilkit.timeutil.iso8601 import (
    IsoWeekday,
    WeekDate,
    to_iso8601_string,
    to_sortable_date,
    to_sortable_datetime,
)

UTC = datetime.UTC
PLUS_3 = datetime.timezone(datetime.timedelta(hours=3))
MINUS_0530 = datetime.timezone(-datetime.timedelta(hours=5, minutes=30))

NAIVE = datetime.datetime(2026, 3, 1, 10, 0, 5)


def _has_zone(name: str) -> bool:
    try:
        ZoneInfo(name)
    except ZoneInfoNotFoundError:
        return False
    return True


class TestToIso8601String:
    def test_plain(self) -> None:
        assert to_iso8601_string(NAIVE, tz=UTC) == "2026-03-01T10:00:05"

    def test_show_timezone(self) -> None:
        assert to_iso8601_string(NAIVE, tz=PLUS_3, show_timezone=True) == "2026-03-01T10:00:05+03:00"

    def test_negative_offset(self) -> None:
        result = to_iso8601_string(NAIVE, tz=MINUS_0530, show_timezone=True)
        assert result == "2026-03-01T10:00:05-05:30"

    def test_zulu(self) -> None:
        assert to_iso8601_string(NAIVE, tz=PLUS_3, zulu=True) == "2026-03-01T07:00:05Z"

    def test_to_utc_without_suffix(self) -> None:
        assert to_iso8601_string(NAIVE, tz=PLUS_3, to_utc=True) == "2026-03-01T07:00:05"

    def test_to_utc_with_timezone(self) -> None:
        result = to_iso8601_string(NAIVE, tz=PLUS_3, to_utc=True, show_timezone=True)
        assert result == "2026-03-01T07:00:05+00:00"

    def test_aware_value_keeps_its_zone(self) -> None:
        value = NAIVE.replace(tzinfo=PLUS_3)
        assert to_iso8601_string(value, tz=UTC, show_timezone=True) == "2026-03-01T10:00:05+03:00"

    @pytest.mark.skipif(not _has_zone("Europe/Moscow"), reason="no tz database")
    def test_zone_name(self) -> None:
        result = to_iso8601_string(NAIVE, tz="Europe/Moscow", show_timezone=True)
        assert result == "2026-03-01T10:00:05+03:00"


class TestWeekDate:
    @pytest.mark.parametrize(
        ("day", "expected"),
        [
            (datetime.date(2026, 3, 1), "2026-W09-7"),
            (datetime.date(2021, 1, 1), "2020-W53-5"),
            (datetime.date(2024, 12, 30), "2025-W01-1"),
            (datetime.date(2026, 1, 5), "2026-W02-1"),
        ],
    )
    def test_format(self, day: datetime.date, expected: str) -> None:
        assert str(WeekDate(day)) == expected

    def test_parts(self) -> None:
        wd = WeekDate(datetime.date(2021, 1, 1))
        assert (wd.year, wd.week, wd.day) == (2020, 53, 5)
        assert wd.day_of_week is IsoWeekday.FRIDAY

    def test_accepts_datetime(self) -> None:
        wd = WeekDate(datetime.datetime(2026, 3, 1, 23, 59))
        assert wd.date == datetime.date(2026, 3, 1)

    def test_first_day_of_week(self) -> None:
        assert WeekDate(datetime.date(2026, 3, 1)).first_day_of_week() == datetime.date(2026, 2, 23)

    def test_parse(self) -> None:
        assert WeekDate.parse("2020-W53-5") == WeekDate(datetime.date(2021, 1, 1))

    @pytest.mark.parametrize("text", ["2020-53-5", "2020-W53-8", "2021-W53-1", ""])
    def test_parse_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            WeekDate.parse(text)


class TestSortable:
    def test_datetime(self) -> None:
        assert to_sortable_datetime(NAIVE) == "20260301100005"

    def test_date(self) -> None:
        assert to_sortable_date(datetime.date(2026, 3, 1)) == "20260301"
