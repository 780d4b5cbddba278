"""Key-value query functions.

Values are stored as text. Encoding and decoding is up to the caller.
"""

import sqlite3
from pathlib import Path

from kinsenas.store.schema import get_db_path


def _connect(db_path: Path | None = None) -> sqlite3.Connection:
    """Create a database connection with row factory.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Database connection with row_factory configured.
    """
    if db_path is None:
        db_path = get_db_path()
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def get_value(key: str, db_path: Path | None = None) -> str | None:
    """Get the stored value for a key.

    Args:
        key: Storage key (e.g., "budget.rows").
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Stored text, or None if the key has never been written.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT value FROM settings WHERE key = ?", (key,))
        result = cursor.fetchone()
        return result["value"] if result else None


def set_value(key: str, value: str, db_path: Path | None = None) -> None:
    """Store a value, replacing any previous one.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    set_values({key: value}, db_path)


def set_values(values: dict[str, str], db_path: Path | None = None) -> None:
    """Store several values in a single transaction.

    Args:
        values: Mapping of key to text value.
        db_path: Path to the database file. If None, uses default location.

    Raises:
        sqlite3.Error: If database operation fails. No value is written then.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.executemany(
                """
                INSERT INTO settings (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                list(values.items()),
            )
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise
