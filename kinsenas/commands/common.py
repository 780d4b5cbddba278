"""Helpers shared by the command modules."""

from pathlib import Path

from kinsenas.config import get_currency, get_database_path, load_config_or_default


def resolve_settings() -> tuple[Path, str]:
    """Read configuration for a command.

    Returns:
        Tuple of (db_path, currency).
    """
    config = load_config_or_default()
    return get_database_path(config), get_currency(config)


def format_amount(value: float, currency: str) -> str:
    """Format an amount for display (e.g., "₱26,000.00", "-₱1,157.00")."""
    if value < 0:
        return f"-{currency}{abs(value):,.2f}"
    return f"{currency}{value:,.2f}"


def format_balance(value: float, currency: str) -> str:
    """Format a balance with rich markup, red when negative."""
    colour = "red" if value < 0 else "green"
    return f"[{colour}]{format_amount(value, currency)}[/{colour}]"


def ordinal(day: int) -> str:
    """Day of month with its English suffix (e.g., "1st", "15th", "22nd")."""
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def row_index(number: int, row_count: int) -> int | None:
    """Convert a 1-based row number to a list index, None if out of range."""
    if 1 <= number <= row_count:
        return number - 1
    return None
