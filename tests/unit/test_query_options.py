"""Unit tests for query window derivation and version flags."""

from datetime import date, datetime, time, timedelta, timezone

import pytest

from cipscout.exceptions import InputError
from cipscout.services.query import QueryOptions, Version, parse_filters

PARIS = timezone(timedelta(hours=2))
NOW = datetime(2024, 6, 8, 15, 0, tzinfo=PARIS)
DAY_START = time(4, 0)


def options(**kwargs) -> QueryOptions:
    return QueryOptions(now=NOW, tz=PARIS, day_start=DAY_START, **kwargs)


class TestWindow:
    def test_no_day_or_time_means_no_window(self) -> None:
        opts = options()
        assert opts.after() is None
        assert opts.before() is None

    def test_day_only_spans_day_start_to_day_start(self) -> None:
        opts = options(day=date(2024, 6, 10))
        assert opts.after() == datetime(2024, 6, 10, 4, 0, tzinfo=PARIS)
        assert opts.before() == datetime(2024, 6, 11, 4, 0, tzinfo=PARIS)

    def test_time_only_uses_today(self) -> None:
        opts = options(time_of_day=time(18, 0))
        assert opts.after() == datetime(2024, 6, 8, 18, 0, tzinfo=PARIS)
        assert opts.before() == datetime(2024, 6, 9, 4, 0, tzinfo=PARIS)

    def test_day_and_time(self) -> None:
        opts = options(day=date(2024, 6, 10), time_of_day=time(20, 30))
        assert opts.after() == datetime(2024, 6, 10, 20, 30, tzinfo=PARIS)
        assert opts.before() == datetime(2024, 6, 11, 4, 0, tzinfo=PARIS)

    def test_midnight_filter_is_not_treated_as_missing(self) -> None:
        opts = options(day=date(2024, 6, 10), time_of_day=time(0, 0))
        assert opts.after() == datetime(2024, 6, 10, 0, 0, tzinfo=PARIS)
        assert opts.before() == datetime(2024, 6, 11, 4, 0, tzinfo=PARIS)

    def test_window_crosses_month_end(self) -> None:
        opts = options(day=date(2024, 6, 30))
        assert opts.before() == datetime(2024, 7, 1, 4, 0, tzinfo=PARIS)


class TestVersionFlags:
    def test_vo_only(self) -> None:
        assert Version.from_flags(vo=True, vf=False) is Version.ORIGINAL

    def test_vf_only(self) -> None:
        assert Version.from_flags(vo=False, vf=True) is Version.FRENCH

    @pytest.mark.parametrize("flag", [True, False])
    def test_both_or_neither_is_unrestricted(self, flag: bool) -> None:
        assert Version.from_flags(vo=flag, vf=flag) is None

    def test_values_are_the_site_labels(self) -> None:
        assert Version.ORIGINAL.value == "VO"
        assert Version.FRENCH.value == "VF"


class TestParseFilters:
    def test_parses_both_filters(self) -> None:
        assert parse_filters("10/06", "20:30", NOW) == (date(2024, 6, 10), time(20, 30))

    def test_missing_filters_are_none(self) -> None:
        assert parse_filters(None, None, NOW) == (None, None)

    def test_day_before_now_is_next_year(self) -> None:
        day, _ = parse_filters("01/06", None, NOW)
        assert day == date(2025, 6, 1)

    @pytest.mark.parametrize(
        ("day", "time_of_day"),
        [("10-06", None), ("31/02", None), (None, "8pm"), (None, "24:00")],
    )
    def test_malformed_input_raises_input_error(
        self, day: str | None, time_of_day: str | None
    ) -> None:
        with pytest.raises(InputError):
            parse_filters(day, time_of_day, NOW)
