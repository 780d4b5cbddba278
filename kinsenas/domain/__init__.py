"""Domain models and types for kinsenas.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from infrastructure
"""

from kinsenas.domain.amounts import parse_amount
from kinsenas.domain.models import BudgetRow, ExpensesRow, Month

__all__ = ["BudgetRow", "ExpensesRow", "Month", "parse_amount"]
