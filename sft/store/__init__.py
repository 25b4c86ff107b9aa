"""Storage layer - provides persistence for the application.

This module re-exports all public storage functions for easy importing.
"""

from sft.store.queries import (
    GOAL_KEY,
    THEME_KEY,
    TRANSACTIONS_KEY,
    clear_goal,
    get_item,
    load_goal,
    load_json,
    load_ledger,
    load_theme,
    load_transactions,
    remove_item,
    save_goal,
    save_json,
    save_ledger,
    save_theme,
    save_transactions,
    set_item,
)
from sft.store.schema import database_exists, get_db_path, init_database

__all__ = [
    # Schema
    "database_exists",
    "get_db_path",
    "init_database",
    # Keys
    "GOAL_KEY",
    "THEME_KEY",
    "TRANSACTIONS_KEY",
    # Queries
    "clear_goal",
    "get_item",
    "load_goal",
    "load_json",
    "load_ledger",
    "load_theme",
    "load_transactions",
    "remove_item",
    "save_goal",
    "save_json",
    "save_ledger",
    "save_theme",
    "save_transactions",
    "set_item",
]
