"""Tests for kinsenas.domain.budget pure functions."""

import pytest

from kinsenas.domain.budget import (
    calculate_monthly_total,
    calculate_remaining,
    can_remove_row,
    clamp_cutoff_day,
    cutoff_amount,
    default_budget_rows,
    is_valid_cutoff_day,
)
from kinsenas.domain.models import BudgetRow


def make_rows(*amounts: tuple[str, str]) -> list[BudgetRow]:
    """Build rows from (first, second) amount pairs, the first being the salary."""
    return [
        BudgetRow(name=f"row {i}", first_cutoff=first, second_cutoff=second)
        for i, (first, second) in enumerate(amounts)
    ]


class TestDefaultBudgetRows:
    """Tests for default_budget_rows."""

    def test_default_names(self) -> None:
        """Should seed the five default rows in order."""
        rows = default_budget_rows()

        assert [row.name for row in rows] == ["Salary", "Housing Loan", "Autoloan", "HMO", "Savings"]

    def test_default_amounts(self) -> None:
        """Should seed the default amounts for both cutoffs."""
        rows = default_budget_rows()

        assert [row.first_cutoff for row in rows] == ["26000", "6000", "8000", "1157", "5000"]
        assert [row.second_cutoff for row in rows] == ["27000", "6000", "8000", "1157", "5000"]

    def test_default_remaining_after_first_cutoff(self) -> None:
        """Should leave 5843 after the first cutoff."""
        assert calculate_remaining(default_budget_rows(), "first") == 5843.0  # 26000 - 20157

    def test_default_remaining_after_second_cutoff(self) -> None:
        """Should leave 6843 after the second cutoff."""
        assert calculate_remaining(default_budget_rows(), "second") == 6843.0  # 27000 - 20157


class TestCalculateMonthlyTotal:
    """Tests for calculate_monthly_total."""

    def test_sums_both_cutoffs_including_salary(self) -> None:
        """Should add both cutoffs of every row."""
        rows = make_rows(("100", "200"), ("10", "20"))

        assert calculate_monthly_total(rows) == 330.0

    def test_default_rows(self) -> None:
        """Should total the default seed."""
        assert calculate_monthly_total(default_budget_rows()) == 93314.0

    def test_non_numeric_contributes_zero(self) -> None:
        """Should count invalid text as zero."""
        rows = make_rows(("100", "abc"), ("", "20"))

        assert calculate_monthly_total(rows) == 120.0

    def test_empty_list(self) -> None:
        """Should be zero for no rows."""
        assert calculate_monthly_total([]) == 0


class TestCalculateRemaining:
    """Tests for calculate_remaining."""

    def test_subtracts_other_rows_from_salary(self) -> None:
        """Should subtract each cutoff's expenses from the salary."""
        rows = make_rows(("1000", "2000"), ("300", "500"), ("100", "abc"))

        assert calculate_remaining(rows, "first") == 600.0
        assert calculate_remaining(rows, "second") == 1500.0

    def test_salary_only(self) -> None:
        """Should return the salary when there are no expenses."""
        rows = make_rows(("1000", "2000"))

        assert calculate_remaining(rows, "first") == 1000.0

    def test_can_go_negative(self) -> None:
        """Should report overspending as a negative balance."""
        rows = make_rows(("100", "100"), ("250", "0"))

        assert calculate_remaining(rows, "first") == -150.0

    def test_invalid_salary_counts_as_zero(self) -> None:
        """Should treat an invalid salary as zero."""
        rows = make_rows(("salary?", "0"), ("50", "0"))

        assert calculate_remaining(rows, "first") == -50.0

    def test_overflowing_amounts_stay_finite(self) -> None:
        """Should count amounts too large for a float as zero."""
        rows = make_rows(("1e400", "0"), ("1e400", "0"), ("50", "0"))

        assert calculate_remaining(rows, "first") == -50.0

    def test_empty_list(self) -> None:
        """Should be zero for no rows."""
        assert calculate_remaining([], "first") == 0
        assert calculate_remaining([], "second") == 0


class TestCutoffAmount:
    """Tests for cutoff_amount."""

    def test_picks_cutoff(self) -> None:
        """Should read the requested cutoff."""
        row = BudgetRow(first_cutoff="1", second_cutoff="2")

        assert cutoff_amount(row, "first") == 1.0
        assert cutoff_amount(row, "second") == 2.0

    def test_unknown_cutoff(self) -> None:
        """Should reject an unknown cutoff name."""
        with pytest.raises(ValueError):
            cutoff_amount(BudgetRow(), "third")  # type: ignore[arg-type]


class TestClampCutoffDay:
    """Tests for clamp_cutoff_day."""

    @pytest.mark.parametrize(("day", "expected"), [(-5, 1), (0, 1), (1, 1), (15, 15), (31, 31), (32, 31), (100, 31)])
    def test_clamps_into_range(self, day: int, expected: int) -> None:
        """Should clamp into [1, 31]."""
        assert clamp_cutoff_day(day) == expected


class TestIsValidCutoffDay:
    """Tests for is_valid_cutoff_day."""

    def test_in_range(self) -> None:
        """Should accept days 1 to 31."""
        assert all(is_valid_cutoff_day(day) for day in range(1, 32))

    @pytest.mark.parametrize("value", [0, 32, -1, "15", 15.0, True, None])
    def test_rejects(self, value: object) -> None:
        """Should reject out of range and non-int values."""
        assert not is_valid_cutoff_day(value)


class TestCanRemoveRow:
    """Tests for can_remove_row."""

    def test_salary_row_protected(self) -> None:
        """Should never allow removing the salary row."""
        rows = make_rows(("1", "1"), ("2", "2"))

        assert not can_remove_row(rows, 0)

    def test_other_row(self) -> None:
        """Should allow removing a non-salary row."""
        rows = make_rows(("1", "1"), ("2", "2"))

        assert can_remove_row(rows, 1)

    def test_single_row(self) -> None:
        """Should keep the last remaining row."""
        assert not can_remove_row(make_rows(("1", "1")), 0)

    def test_out_of_range(self) -> None:
        """Should reject indexes outside the list."""
        rows = make_rows(("1", "1"), ("2", "2"))

        assert not can_remove_row(rows, 2)
        assert not can_remove_row(rows, -1)
