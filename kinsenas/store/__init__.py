"""Key-value store layer - provides persistence for the application.

This module re-exports all public storage functions for easy importing.
"""

from kinsenas.store.queries import get_value, set_value, set_values
from kinsenas.store.schema import database_exists, get_db_path, init_database

__all__ = [
    # Schema
    "database_exists",
    "get_db_path",
    "init_database",
    # Queries
    "get_value",
    "set_value",
    "set_values",
]
