"""Domain types for kinsenas.

- Month: Month key in YYYY-MM format
- BudgetRow: Recurring budget line split across two cutoffs
- ExpensesRow: Variable expense line for a single month

Monetary fields are kept as the text the user typed. Parsing to numbers
happens only in the calculation functions.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, NewType

from kinsenas.domain.amounts import parse_amount

# Month key is always in YYYY-MM format (e.g., "2026-01")
Month = NewType("Month", str)


def new_row_id() -> str:
    """Generate an opaque unique row identifier."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class BudgetRow:
    """Budget row with a name and an amount for each cutoff."""

    name: str = ""
    first_cutoff: str = ""
    second_cutoff: str = ""
    id: str = field(default_factory=new_row_id)

    def to_record(self) -> dict[str, str]:
        """Convert to the persisted record shape."""
        return {
            "id": self.id,
            "name": self.name,
            "firstCutoff": self.first_cutoff,
            "secondCutoff": self.second_cutoff,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "BudgetRow":
        """Build a row from a persisted record.

        Raises:
            KeyError: If a field is missing.
            TypeError: If a field is not a string.
        """
        values = (record["id"], record["name"], record["firstCutoff"], record["secondCutoff"])
        if not all(isinstance(value, str) for value in values):
            raise TypeError("Budget row fields must be strings")
        row_id, name, first_cutoff, second_cutoff = values
        return cls(name=name, first_cutoff=first_cutoff, second_cutoff=second_cutoff, id=row_id)


@dataclass(frozen=True)
class ExpensesRow:
    """Expense row with a name and an amount."""

    name: str = ""
    amount: str = ""
    id: str = field(default_factory=new_row_id)

    @property
    def amount_value(self) -> float:
        """Amount parsed as a number, 0 when the text is not numeric."""
        return parse_amount(self.amount)

    def to_record(self) -> dict[str, str]:
        """Convert to the persisted record shape."""
        return {"id": self.id, "name": self.name, "amount": self.amount}

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "ExpensesRow":
        """Build a row from a persisted record.

        Raises:
            KeyError: If a field is missing.
            TypeError: If a field is not a string.
        """
        values = (record["id"], record["name"], record["amount"])
        if not all(isinstance(value, str) for value in values):
            raise TypeError("Expense row fields must be strings")
        row_id, name, amount = values
        return cls(name=name, amount=amount, id=row_id)
