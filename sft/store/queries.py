"""Key-value storage queries and JSON persistence of the ledger."""

import json
import logging
import sqlite3
from pathlib import Path
from typing import Any

from sft.domain.ledger import (
    Ledger,
    SavingsGoal,
    Transaction,
    goal_from_dict,
    goal_to_dict,
    transaction_from_dict,
    transaction_to_dict,
)
from sft.domain.theme import Theme, parse_theme
from sft.store.schema import get_db_path, init_database

logger = logging.getLogger(__name__)

TRANSACTIONS_KEY = "sft_transactions"
THEME_KEY = "sft_theme"
GOAL_KEY = "sft_goal"


def _connect(db_path: Path | None = None) -> sqlite3.Connection:
    """Create a database connection, initializing the schema on first use.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Database connection with row_factory configured.
    """
    if db_path is None:
        db_path = get_db_path()
    if not db_path.exists():
        init_database(db_path)
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def get_item(key: str, db_path: Path | None = None) -> str | None:
    """Get a raw stored value.

    Args:
        key: Storage key.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Stored string, or None if the key is absent.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT value FROM storage WHERE key = ?", (key,))
        row = cursor.fetchone()
        return row["value"] if row else None


def set_item(key: str, value: str, db_path: Path | None = None) -> None:
    """Store a raw value, replacing any previous one.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute(
                "INSERT INTO storage (key, value) VALUES (?, ?) ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, value),
            )
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise


def remove_item(key: str, db_path: Path | None = None) -> None:
    """Delete a stored value. Absent keys are ignored.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute("DELETE FROM storage WHERE key = ?", (key,))
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise


def load_json(key: str, fallback: Any, db_path: Path | None = None) -> Any:
    """Load a JSON value.

    Args:
        key: Storage key.
        fallback: Value returned when the key is absent or holds invalid JSON.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Decoded value or fallback.
    """
    raw = get_item(key, db_path)
    if not raw:
        return fallback
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Ignoring malformed JSON stored under %s: %s", key, e)
        return fallback


def save_json(key: str, data: Any, db_path: Path | None = None) -> None:
    """Serialize a value as JSON and store it."""
    set_item(key, json.dumps(data, ensure_ascii=False), db_path)


def load_transactions(db_path: Path | None = None) -> tuple[Transaction, ...]:
    """Load all transactions.

    Returns:
        Transactions in stored order. A non-list value loads as empty and
        malformed records are skipped.
    """
    data = load_json(TRANSACTIONS_KEY, [], db_path)
    if not isinstance(data, list):
        logger.warning("Ignoring stored transactions: expected a list, got %s", type(data).__name__)
        return ()

    transactions = []
    for record in data:
        txn = transaction_from_dict(record)
        if txn is None:
            logger.warning("Skipping malformed transaction record: %r", record)
            continue
        transactions.append(txn)
    return tuple(transactions)


def save_transactions(transactions: tuple[Transaction, ...] | list[Transaction], db_path: Path | None = None) -> None:
    """Persist the full transaction list."""
    save_json(TRANSACTIONS_KEY, [transaction_to_dict(t) for t in transactions], db_path)


def load_goal(db_path: Path | None = None) -> SavingsGoal | None:
    """Load the savings goal, or None if absent or malformed."""
    data = load_json(GOAL_KEY, None, db_path)
    if data is None:
        return None
    goal = goal_from_dict(data)
    if goal is None:
        logger.warning("Ignoring malformed savings goal: %r", data)
    return goal


def save_goal(goal: SavingsGoal, db_path: Path | None = None) -> None:
    """Persist the savings goal."""
    save_json(GOAL_KEY, goal_to_dict(goal), db_path)


def clear_goal(db_path: Path | None = None) -> None:
    """Remove the persisted savings goal."""
    remove_item(GOAL_KEY, db_path)


def load_theme(db_path: Path | None = None) -> Theme:
    """Load the theme preference, defaulting to dark."""
    return parse_theme(get_item(THEME_KEY, db_path))


def save_theme(theme: Theme, db_path: Path | None = None) -> None:
    """Persist the theme preference as a plain string."""
    set_item(THEME_KEY, theme.value, db_path)


def load_ledger(db_path: Path | None = None) -> Ledger:
    """Load transactions, goal and theme into a Ledger."""
    return Ledger(
        transactions=load_transactions(db_path),
        goal=load_goal(db_path),
        theme=load_theme(db_path),
    )


def save_ledger(ledger: Ledger, db_path: Path | None = None) -> None:
    """Persist all three records of a Ledger.

    An absent goal removes the stored goal record.
    """
    save_transactions(ledger.transactions, db_path)
    save_theme(ledger.theme, db_path)
    if ledger.goal is None:
        clear_goal(db_path)
    else:
        save_goal(ledger.goal, db_path)
