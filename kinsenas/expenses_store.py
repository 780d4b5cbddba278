"""Persisted state for the month-by-month expense tracker.

All months live in one mapping stored under a single key. The store exposes
the rows of the selected month only; every change to them writes back the
whole mapping.
"""

import json
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import Iterable

from kinsenas.dates import month_key, month_start, month_title, shift_month
from kinsenas.domain.expenses import calculate_total_expenses, default_expense_rows, remove_at_offsets
from kinsenas.domain.models import ExpensesRow, Month
from kinsenas.store.queries import get_value, set_value
from kinsenas.store.schema import init_database

BY_MONTH_KEY = "expenses.byMonth"


def decode_month_rows(data: str | None) -> dict[Month, list[ExpensesRow]] | None:
    """Decode the persisted month mapping.

    Returns:
        Mapping of month key to rows, or None if nothing is stored or the data
        is unreadable.
    """
    if data is None:
        return None
    try:
        mapping = json.loads(data)
        if not isinstance(mapping, dict):
            return None
        return {
            Month(key): [ExpensesRow.from_record(record) for record in records] for key, records in mapping.items()
        }
    except (ValueError, KeyError, TypeError, RecursionError):
        return None


class ExpensesStore:
    """Monthly expense rows backed by the key-value store."""

    def __init__(self, db_path: Path | None = None, today: date | None = None) -> None:
        self.db_path = db_path
        self._all_month_rows: dict[Month, list[ExpensesRow]] = {}
        self._rows: list[ExpensesRow] = []
        self._selected_month = month_start(today or date.today())

        init_database(db_path)
        self.load()
        self.load_rows_for_selected_month()

    @property
    def selected_month(self) -> date:
        """First day of the month being viewed."""
        return self._selected_month

    @selected_month.setter
    def selected_month(self, value: date) -> None:
        self._selected_month = month_start(value)
        self.load_rows_for_selected_month()

    @property
    def selected_month_key(self) -> Month:
        return month_key(self._selected_month)

    @property
    def selected_month_title(self) -> str:
        return month_title(self._selected_month)

    @property
    def rows(self) -> list[ExpensesRow]:
        """Rows of the selected month."""
        return list(self._rows)

    def load(self) -> None:
        """Restore the month mapping from storage, empty if missing or unreadable."""
        decoded = decode_month_rows(get_value(BY_MONTH_KEY, self.db_path))
        self._all_month_rows = decoded if decoded is not None else {}

    def load_rows_for_selected_month(self) -> None:
        """Show the selected month's rows.

        A month that has never been edited gets the default categories. They
        are saved only once the month is first changed.
        """
        stored = self._all_month_rows.get(self.selected_month_key)
        self._rows = list(stored) if stored is not None else default_expense_rows()

    def go_to_previous_month(self) -> None:
        self.selected_month = shift_month(self._selected_month, -1)

    def go_to_next_month(self) -> None:
        self.selected_month = shift_month(self._selected_month, 1)

    def add_row(self) -> ExpensesRow:
        """Append a blank row to the selected month.

        Returns:
            The new row, so callers can edit it by id.
        """
        row = ExpensesRow()
        self._commit_rows([*self._rows, row])
        return row

    def remove_last_row(self) -> bool:
        """Remove the selected month's last row, if there is one.

        Returns:
            True if a row was removed.
        """
        if not self._rows:
            return False
        self._commit_rows(self._rows[:-1])
        return True

    def remove_rows(self, offsets: Iterable[int]) -> int:
        """Remove rows of the selected month by position.

        Positions outside the list are ignored.

        Returns:
            Number of rows removed.
        """
        remaining = remove_at_offsets(self._rows, set(offsets))
        removed = len(self._rows) - len(remaining)
        if removed:
            self._commit_rows(remaining)
        return removed

    def update_row(self, row_id: str, name: str | None = None, amount: str | None = None) -> ExpensesRow:
        """Replace fields of a row in the selected month. Text is stored exactly as given.

        Returns:
            The updated row.

        Raises:
            KeyError: If the selected month has no row with this id.
        """
        for index, row in enumerate(self._rows):
            if row.id == row_id:
                updated = replace(
                    row,
                    name=row.name if name is None else name,
                    amount=row.amount if amount is None else amount,
                )
                rows = list(self._rows)
                rows[index] = updated
                self._commit_rows(rows)
                return updated
        raise KeyError(row_id)

    @property
    def total_expenses(self) -> float:
        return calculate_total_expenses(self._rows)

    def _commit_rows(self, rows: list[ExpensesRow]) -> None:
        # Memory only changes once storage has accepted the new mapping
        all_month_rows = {**self._all_month_rows, self.selected_month_key: rows}
        data = json.dumps(
            {key: [row.to_record() for row in month_rows] for key, month_rows in all_month_rows.items()},
        )
        set_value(BY_MONTH_KEY, data, self.db_path)
        self._all_month_rows = all_month_rows
        self._rows = list(rows)
