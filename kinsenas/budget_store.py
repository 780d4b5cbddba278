"""Persisted state for the recurring budget table.

BudgetStore owns the budget rows and the two cutoff days. Every mutation
validates, applies and persists in one call; there is no other way to change
the stored state.
"""

import json
from dataclasses import replace
from pathlib import Path

from kinsenas.domain.budget import (
    DEFAULT_FIRST_CUTOFF_DAY,
    DEFAULT_SECOND_CUTOFF_DAY,
    Cutoff,
    calculate_monthly_total,
    calculate_remaining,
    can_remove_row,
    clamp_cutoff_day,
    default_budget_rows,
    is_valid_cutoff_day,
)
from kinsenas.domain.models import BudgetRow
from kinsenas.store.queries import get_value, set_value, set_values
from kinsenas.store.schema import init_database

ROWS_KEY = "budget.rows"
FIRST_CUTOFF_DAY_KEY = "budget.firstCutoffDay"
SECOND_CUTOFF_DAY_KEY = "budget.secondCutoffDay"


def decode_budget_rows(data: str | None) -> list[BudgetRow] | None:
    """Decode a persisted row list.

    Returns:
        Decoded rows, or None if nothing is stored or the data is unreadable.
    """
    if data is None:
        return None
    try:
        records = json.loads(data)
        if not isinstance(records, list):
            return None
        return [BudgetRow.from_record(record) for record in records]
    except (ValueError, KeyError, TypeError, RecursionError):
        return None


def decode_cutoff_day(data: str | None) -> int | None:
    """Decode a persisted cutoff day, None unless it is an int within [1, 31]."""
    if data is None:
        return None
    try:
        value = json.loads(data)
    except (ValueError, RecursionError):
        return None
    return value if is_valid_cutoff_day(value) else None


class BudgetStore:
    """Budget rows and cutoff days backed by the key-value store."""

    def __init__(self, db_path: Path | None = None) -> None:
        self.db_path = db_path
        self._rows: list[BudgetRow] = []
        self._first_cutoff_day = DEFAULT_FIRST_CUTOFF_DAY
        self._second_cutoff_day = DEFAULT_SECOND_CUTOFF_DAY

        init_database(db_path)
        self.load()

    @property
    def rows(self) -> list[BudgetRow]:
        """Current rows, salary row first."""
        return list(self._rows)

    @property
    def salary_row(self) -> BudgetRow | None:
        return self._rows[0] if self._rows else None

    @property
    def first_cutoff_day(self) -> int:
        return self._first_cutoff_day

    @property
    def second_cutoff_day(self) -> int:
        return self._second_cutoff_day

    def load(self) -> None:
        """Restore rows and cutoff days from storage.

        Missing or unreadable rows are replaced by the default seed, which is
        persisted right away. Missing or out of range cutoff days keep their
        defaults.
        """
        rows = decode_budget_rows(get_value(ROWS_KEY, self.db_path))
        if rows is None:
            self._commit_rows(default_budget_rows())
        else:
            self._rows = rows

        first = decode_cutoff_day(get_value(FIRST_CUTOFF_DAY_KEY, self.db_path))
        if first is not None:
            self._first_cutoff_day = first

        second = decode_cutoff_day(get_value(SECOND_CUTOFF_DAY_KEY, self.db_path))
        if second is not None:
            self._second_cutoff_day = second

    def add_row(self) -> BudgetRow:
        """Append a blank row.

        Returns:
            The new row, so callers can edit it by id.
        """
        row = BudgetRow()
        self._commit_rows([*self._rows, row])
        return row

    def remove_last_row(self) -> bool:
        """Remove the last row unless it is the only one left.

        Returns:
            True if a row was removed.
        """
        if len(self._rows) <= 1:
            return False
        self._commit_rows(self._rows[:-1])
        return True

    def remove_row(self, row_id: str) -> bool:
        """Remove a row by id.

        The salary row and the only remaining row are never removed, and an
        unknown id changes nothing.

        Returns:
            True if a row was removed.
        """
        index = self._index_of(row_id)
        if index is None or not can_remove_row(self._rows, index):
            return False
        self._commit_rows(self._rows[:index] + self._rows[index + 1 :])
        return True

    def update_row(
        self,
        row_id: str,
        name: str | None = None,
        first_cutoff: str | None = None,
        second_cutoff: str | None = None,
    ) -> BudgetRow:
        """Replace fields of a row. Text is stored exactly as given.

        Returns:
            The updated row.

        Raises:
            KeyError: If no row has this id.
        """
        index = self._index_of(row_id)
        if index is None:
            raise KeyError(row_id)

        row = self._rows[index]
        updated = replace(
            row,
            name=row.name if name is None else name,
            first_cutoff=row.first_cutoff if first_cutoff is None else first_cutoff,
            second_cutoff=row.second_cutoff if second_cutoff is None else second_cutoff,
        )
        rows = list(self._rows)
        rows[index] = updated
        self._commit_rows(rows)
        return updated

    def set_cutoff_day(self, which: Cutoff, day: int) -> int:
        """Set one of the cutoff days, clamped to [1, 31].

        Both cutoff days are persisted together.

        Returns:
            The day actually stored.

        Raises:
            ValueError: If which is not "first" or "second".
        """
        clamped = clamp_cutoff_day(day)
        if which == "first":
            self._commit_cutoff_days(clamped, self._second_cutoff_day)
        elif which == "second":
            self._commit_cutoff_days(self._first_cutoff_day, clamped)
        else:
            raise ValueError(f"Unknown cutoff: {which!r}")
        return clamped

    def reset(self) -> None:
        """Restore the default rows and cutoff days."""
        self._commit_rows(default_budget_rows())
        self._commit_cutoff_days(DEFAULT_FIRST_CUTOFF_DAY, DEFAULT_SECOND_CUTOFF_DAY)

    @property
    def monthly_total_value(self) -> float:
        return calculate_monthly_total(self._rows)

    @property
    def remaining_after_first_cutoff(self) -> float:
        return calculate_remaining(self._rows, "first")

    @property
    def remaining_after_second_cutoff(self) -> float:
        return calculate_remaining(self._rows, "second")

    def _index_of(self, row_id: str) -> int | None:
        for index, row in enumerate(self._rows):
            if row.id == row_id:
                return index
        return None

    def _commit_rows(self, rows: list[BudgetRow]) -> None:
        # Memory only changes once storage has accepted the new rows
        data = json.dumps([row.to_record() for row in rows])
        set_value(ROWS_KEY, data, self.db_path)
        self._rows = rows

    def _commit_cutoff_days(self, first: int, second: int) -> None:
        set_values(
            {
                FIRST_CUTOFF_DAY_KEY: json.dumps(first),
                SECOND_CUTOFF_DAY_KEY: json.dumps(second),
            },
            self.db_path,
        )
        self._first_cutoff_day = first
        self._second_cutoff_day = second
