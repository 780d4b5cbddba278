"""Pure functions for budget row calculations.

This module contains the functional core for the budget table:
- No I/O operations (no database, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

The first row of a budget is the salary row. Its amounts are what the other
rows are subtracted from.
"""

from typing import Literal

from kinsenas.domain.amounts import parse_amount
from kinsenas.domain.models import BudgetRow

MIN_CUTOFF_DAY = 1
MAX_CUTOFF_DAY = 31
DEFAULT_FIRST_CUTOFF_DAY = 15
DEFAULT_SECOND_CUTOFF_DAY = 30

Cutoff = Literal["first", "second"]

# (name, first cutoff, second cutoff) seeded on first launch
_DEFAULT_ROWS: tuple[tuple[str, str, str], ...] = (
    ("Salary", "26000", "27000"),
    ("Housing Loan", "6000", "6000"),
    ("Autoloan", "8000", "8000"),
    ("HMO", "1157", "1157"),
    ("Savings", "5000", "5000"),
)


def default_budget_rows() -> list[BudgetRow]:
    """Create the default budget rows, each with a fresh id."""
    return [BudgetRow(name=name, first_cutoff=first, second_cutoff=second) for name, first, second in _DEFAULT_ROWS]


def cutoff_amount(row: BudgetRow, cutoff: Cutoff) -> float:
    """Get a row's parsed amount for one cutoff.

    Raises:
        ValueError: If cutoff is not "first" or "second".
    """
    if cutoff == "first":
        return parse_amount(row.first_cutoff)
    if cutoff == "second":
        return parse_amount(row.second_cutoff)
    raise ValueError(f"Unknown cutoff: {cutoff!r}")


def calculate_monthly_total(rows: list[BudgetRow]) -> float:
    """Sum both cutoff amounts over every row, salary row included.

    Non-numeric text counts as 0.
    """
    return sum(parse_amount(row.first_cutoff) + parse_amount(row.second_cutoff) for row in rows)


def calculate_remaining(rows: list[BudgetRow], cutoff: Cutoff) -> float:
    """Calculate what is left of the salary after one cutoff's expenses.

    Args:
        rows: Budget rows, salary row first.
        cutoff: Which cutoff to calculate for.

    Returns:
        Salary amount for the cutoff minus the same cutoff's amount summed over
        the remaining rows. 0 for an empty list. Can be negative.
    """
    if not rows:
        return 0.0

    salary, *expenses = rows
    return cutoff_amount(salary, cutoff) - sum(cutoff_amount(row, cutoff) for row in expenses)


def clamp_cutoff_day(day: int) -> int:
    """Clamp a day of month into the valid cutoff range [1, 31]."""
    return max(MIN_CUTOFF_DAY, min(MAX_CUTOFF_DAY, day))


def is_valid_cutoff_day(value: object) -> bool:
    """Check whether a stored value is a usable cutoff day."""
    # bool is an int subclass but never a day
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_CUTOFF_DAY <= value <= MAX_CUTOFF_DAY


def can_remove_row(rows: list[BudgetRow], index: int) -> bool:
    """Check whether the row at index may be removed.

    The salary row (index 0) is never removable, and a budget always keeps at
    least one row.
    """
    if len(rows) <= 1:
        return False
    return 0 < index < len(rows)
