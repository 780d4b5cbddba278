"""Tests for kinsenas.dates pure functions."""

import locale
from datetime import date, datetime

import pytest

from kinsenas.dates import month_key, month_start, month_title, parse_month_key, shift_month
from kinsenas.domain.models import Month


class TestMonthStart:
    """Tests for month_start."""

    def test_mid_month_date(self) -> None:
        """Should normalise to the first of the month."""
        assert month_start(date(2026, 1, 17)) == date(2026, 1, 1)

    def test_first_of_month_unchanged(self) -> None:
        """Should leave the first of the month as is."""
        assert month_start(date(2026, 3, 1)) == date(2026, 3, 1)

    def test_datetime_becomes_date(self) -> None:
        """Should drop the time part of a datetime."""
        result = month_start(datetime(2026, 5, 31, 23, 59))

        assert result == date(2026, 5, 1)
        assert type(result) is date


class TestShiftMonth:
    """Tests for shift_month."""

    def test_next_month(self) -> None:
        """Should move forward one month."""
        assert shift_month(date(2026, 1, 1), 1) == date(2026, 2, 1)

    def test_previous_month(self) -> None:
        """Should move back one month."""
        assert shift_month(date(2026, 3, 1), -1) == date(2026, 2, 1)

    def test_december_crosses_year(self) -> None:
        """Should roll over into January of the next year."""
        assert shift_month(date(2025, 12, 1), 1) == date(2026, 1, 1)

    def test_january_crosses_year_backwards(self) -> None:
        """Should roll back into December of the previous year."""
        assert shift_month(date(2026, 1, 1), -1) == date(2025, 12, 1)

    def test_end_of_month_date(self) -> None:
        """Should not overflow from the 31st into a short month."""
        assert shift_month(date(2026, 1, 31), 1) == date(2026, 2, 1)

    def test_multiple_months(self) -> None:
        """Should move by more than a year at once."""
        assert shift_month(date(2026, 6, 1), -18) == date(2024, 12, 1)


class TestMonthKey:
    """Tests for month_key."""

    def test_zero_padded_month(self) -> None:
        """Should zero-pad single digit months."""
        assert month_key(date(2026, 1, 1)) == Month("2026-01")

    def test_any_day_in_month_gives_same_key(self) -> None:
        """Should give the same key for every day of a month."""
        keys = {month_key(date(2026, 2, day)) for day in range(1, 29)}

        assert keys == {Month("2026-02")}

    def test_all_months_of_year(self) -> None:
        """Should correctly key all 12 months."""
        for month_num in range(1, 13):
            assert month_key(date(2025, month_num, 1)) == f"2025-{month_num:02d}"

    def test_key_ignores_locale(self) -> None:
        """Should give the same key under a different locale."""
        before = month_key(date(2026, 10, 1))
        previous = locale.setlocale(locale.LC_TIME)
        try:
            try:
                locale.setlocale(locale.LC_TIME, "C.UTF-8")
            except locale.Error:
                pytest.skip("C.UTF-8 locale not available")
            assert month_key(date(2026, 10, 1)) == before == "2026-10"
        finally:
            locale.setlocale(locale.LC_TIME, previous)

    def test_round_trip_through_parse(self) -> None:
        """Should parse back to the first of the same month."""
        assert parse_month_key(month_key(date(2026, 7, 19))) == date(2026, 7, 1)


class TestParseMonthKey:
    """Tests for parse_month_key."""

    def test_valid_key(self) -> None:
        """Should parse to the first day of the month."""
        assert parse_month_key("2025-12") == date(2025, 12, 1)

    def test_invalid_format_raises_valueerror(self) -> None:
        """Should raise ValueError for invalid month format."""
        with pytest.raises(ValueError):
            parse_month_key("invalid")

    def test_invalid_month_number_raises_valueerror(self) -> None:
        """Should raise ValueError for invalid month number."""
        with pytest.raises(ValueError):
            parse_month_key("2025-13")


class TestMonthTitle:
    """Tests for month_title."""

    def test_title(self) -> None:
        """Should format month name and year."""
        assert month_title(date(2026, 1, 1)) == "January 2026"

    def test_december(self) -> None:
        """Should format December."""
        assert month_title(date(2025, 12, 1)) == "December 2025"
