"""Date utilities for kinsenas.

Pure functions for month normalisation, navigation and keys.
"""

from datetime import date, datetime

from kinsenas.domain.models import Month


def month_start(day: date) -> date:
    """Normalise a date (or datetime) to the first day of its month."""
    return date(day.year, day.month, 1)


def shift_month(month: date, offset: int) -> date:
    """Move a month forward or backward by a number of months.

    Args:
        month: Any date within the starting month.
        offset: Months to move (negative moves backward).

    Returns:
        First day of the resulting month.
    """
    index = month.year * 12 + (month.month - 1) + offset
    year, month_index = divmod(index, 12)
    return date(year, month_index + 1, 1)


def month_key(month: date) -> Month:
    """Get the storage key for a month.

    Built from numbers only, so the same month yields the same key under any
    locale.

    Args:
        month: Any date within the month.

    Returns:
        Month in YYYY-MM format (e.g., "2026-01").
    """
    return Month(f"{month.year:04d}-{month.month:02d}")


def parse_month_key(key: str) -> date:
    """Parse a YYYY-MM month key to the first day of that month.

    Raises:
        ValueError: If the key is not a valid YYYY-MM month.
    """
    return datetime.strptime(key, "%Y-%m").date()


def month_title(month: date) -> str:
    """Human-readable month title (e.g., "January 2026")."""
    return month.strftime("%B %Y")
