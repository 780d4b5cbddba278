"""Pure functions for monthly expense calculations."""

from kinsenas.domain.models import ExpensesRow

DEFAULT_EXPENSE_CATEGORIES = ("Food", "Transportation")


def default_expense_rows() -> list[ExpensesRow]:
    """Create the seed rows for a month that has never been edited."""
    return [ExpensesRow(name=name, amount="") for name in DEFAULT_EXPENSE_CATEGORIES]


def calculate_total_expenses(rows: list[ExpensesRow]) -> float:
    """Sum parsed amounts over rows. Non-numeric text counts as 0."""
    return sum(row.amount_value for row in rows)


def remove_at_offsets(rows: list[ExpensesRow], offsets: set[int]) -> list[ExpensesRow]:
    """Return rows without the ones at the given positions.

    Offsets outside the list are ignored.
    """
    return [row for index, row in enumerate(rows) if index not in offsets]
