"""Pure functions for the transaction ledger and savings goal.

This module contains the functional core for state changes:
- No I/O operations (no database, no console, no files)
- No side effects
- Every mutation returns a new Ledger
- Persisting the result is the caller's job

All amounts are in rupiah (Amount type).
"""

import math
import secrets
import string
import time
from dataclasses import dataclass, field, replace
from datetime import date as date_cls
from typing import Any

from sft.domain.models import (
    TRANSACTION_TYPES,
    Amount,
    CategoryName,
    IsoDate,
    TransactionId,
    categories_for,
)
from sft.domain.theme import DEFAULT_THEME, Theme, toggle_theme

_BASE36 = string.digits + string.ascii_lowercase


@dataclass(frozen=True)
class Transaction:
    """Immutable income or expense entry."""

    id: TransactionId
    type: str
    amount: Amount
    category: CategoryName
    date: IsoDate
    desc: str = ""


@dataclass(frozen=True)
class SavingsGoal:
    """Immutable savings goal."""

    name: str
    target: Amount


@dataclass(frozen=True)
class Ledger:
    """Immutable application state: transactions, goal and theme."""

    transactions: tuple[Transaction, ...] = field(default_factory=tuple)
    goal: SavingsGoal | None = None
    theme: Theme = DEFAULT_THEME


def to_base36(number: int) -> str:
    """Encode a non-negative integer in base 36."""
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_id(now_ms: int | None = None) -> TransactionId:
    """Generate a short unique transaction ID.

    The ID is the millisecond timestamp in base 36 followed by five random
    base-36 characters, so IDs sort roughly by creation time.

    Args:
        now_ms: Timestamp in milliseconds. If None, uses the current time.

    Returns:
        New transaction ID.
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(_BASE36) for _ in range(5))
    return TransactionId(to_base36(now_ms) + suffix)


def is_valid_amount(amount: Any) -> bool:
    """Check that an amount is a positive finite number."""
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        return False
    return math.isfinite(amount) and amount > 0


def validate_transaction(txn_type: str, amount: Any, category: str, date: str) -> str | None:
    """Validate transaction input.

    Args:
        txn_type: "income" or "expense".
        amount: Amount in rupiah.
        category: Category name, must belong to the type's vocabulary.
        date: Date in YYYY-MM-DD format.

    Returns:
        Error message, or None if the input is valid.
    """
    if txn_type not in TRANSACTION_TYPES:
        return f"Unknown transaction type '{txn_type}' (expected income or expense)"

    if not is_valid_amount(amount):
        return "Amount must be a positive number"

    if category not in categories_for(txn_type):
        return f"Category '{category}' is not a valid {txn_type} category"

    if not date:
        return "Date is required"
    try:
        date_cls.fromisoformat(date)
    except ValueError:
        return f"Invalid date '{date}' (expected YYYY-MM-DD)"

    return None


def create_transaction(
    txn_type: str,
    amount: Any,
    category: str,
    date: str,
    desc: str = "",
    txn_id: TransactionId | None = None,
) -> tuple[Transaction | None, str | None]:
    """Build a new transaction from user input.

    Args:
        txn_type: "income" or "expense".
        amount: Amount in rupiah.
        category: Category name.
        date: Date in YYYY-MM-DD format.
        desc: Optional free-text description.
        txn_id: ID to use. If None, a fresh one is generated.

    Returns:
        Tuple of (transaction, error). Exactly one of them is None.
    """
    error = validate_transaction(txn_type, amount, category, date)
    if error is not None:
        return None, error

    txn = Transaction(
        id=txn_id or generate_id(),
        type=txn_type,
        amount=Amount(amount),
        category=CategoryName(category),
        date=IsoDate(date),
        desc=(desc or "").strip(),
    )
    return txn, None


def add_transaction(ledger: Ledger, txn: Transaction) -> Ledger:
    """Append a transaction."""
    return replace(ledger, transactions=(*ledger.transactions, txn))


def remove_transaction(ledger: Ledger, txn_id: str) -> Ledger:
    """Remove a transaction by ID.

    Args:
        ledger: Current ledger.
        txn_id: ID to remove. Unknown IDs are ignored.

    Returns:
        Ledger without the matching transaction.
    """
    remaining = tuple(t for t in ledger.transactions if t.id != txn_id)
    if len(remaining) == len(ledger.transactions):
        return ledger
    return replace(ledger, transactions=remaining)


def list_transactions(ledger: Ledger) -> list[Transaction]:
    """Get all transactions in insertion order."""
    return list(ledger.transactions)


def find_transaction(ledger: Ledger, txn_id: str) -> Transaction | None:
    """Find a transaction by ID."""
    return next((t for t in ledger.transactions if t.id == txn_id), None)


def parse_goal(name: str | None, target: Any) -> SavingsGoal | None:
    """Parse savings goal input.

    Args:
        name: Goal name, surrounding whitespace ignored.
        target: Target amount as a number or numeric string.

    Returns:
        SavingsGoal, or None if the name is empty or the target is not a
        positive finite number.
    """
    name = (name or "").strip()
    if not name:
        return None

    if isinstance(target, str):
        try:
            target = float(target)
        except ValueError:
            return None

    if not is_valid_amount(target):
        return None

    return SavingsGoal(name=name, target=Amount(target))


def set_goal(ledger: Ledger, name: str | None, target: Any) -> Ledger:
    """Replace the savings goal.

    Invalid input leaves the ledger unchanged.
    """
    goal = parse_goal(name, target)
    if goal is None:
        return ledger
    return replace(ledger, goal=goal)


def clear_goal(ledger: Ledger) -> Ledger:
    """Remove the savings goal."""
    return replace(ledger, goal=None)


def set_theme(ledger: Ledger, theme: Theme) -> Ledger:
    """Set the display theme."""
    return replace(ledger, theme=theme)


def toggle_ledger_theme(ledger: Ledger) -> Ledger:
    """Flip the display theme between light and dark."""
    return set_theme(ledger, toggle_theme(ledger.theme))


def transaction_to_dict(txn: Transaction) -> dict[str, Any]:
    """Convert a transaction to its persisted JSON shape."""
    return {
        "id": txn.id,
        "type": txn.type,
        "amount": txn.amount,
        "category": txn.category,
        "date": txn.date,
        "desc": txn.desc,
    }


def transaction_from_dict(data: Any) -> Transaction | None:
    """Build a transaction from its persisted JSON shape.

    Args:
        data: Decoded JSON value.

    Returns:
        Transaction, or None if required fields are missing or malformed,
        including amounts that are not positive finite numbers.
    """
    if not isinstance(data, dict):
        return None

    txn_id = data.get("id")
    txn_type = data.get("type")
    amount = data.get("amount")
    if not isinstance(txn_id, str) or not txn_id:
        return None
    if txn_type not in TRANSACTION_TYPES:
        return None
    if not is_valid_amount(amount):
        return None

    return Transaction(
        id=TransactionId(txn_id),
        type=txn_type,
        amount=Amount(amount),
        category=CategoryName(str(data.get("category") or "")),
        date=IsoDate(str(data.get("date") or "")),
        desc=str(data.get("desc") or ""),
    )


def goal_to_dict(goal: SavingsGoal) -> dict[str, Any]:
    """Convert a savings goal to its persisted JSON shape."""
    return {"name": goal.name, "target": goal.target}


def goal_from_dict(data: Any) -> SavingsGoal | None:
    """Build a savings goal from its persisted JSON shape."""
    if not isinstance(data, dict):
        return None
    return parse_goal(data.get("name"), data.get("target"))
