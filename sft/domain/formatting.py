"""Pure functions for display formatting and table ordering."""

import math
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from sft.domain.ledger import Transaction

DEFAULT_CURRENCY_SYMBOL = "Rp"

TABLE_FILTERS = ("all", "income", "expense")


def format_currency(amount: float, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format an amount as Indonesian rupiah.

    Digits are grouped with "." and rounded to whole rupiah.

    Args:
        amount: Amount to format (may be negative).
        symbol: Currency symbol prefix.

    Returns:
        Formatted string, e.g. "Rp 5.000.000" or "-Rp 3.000.000".
        Overflowed totals show as "Rp ∞" and NaN as "Rp -".
    """
    if math.isnan(amount):
        return f"{symbol} -"
    if math.isinf(amount):
        return f"{'-' if amount < 0 else ''}{symbol} ∞"

    rounded = int(Decimal(str(abs(amount))).to_integral_value(rounding=ROUND_HALF_UP))
    grouped = f"{rounded:,}".replace(",", ".")
    sign = "-" if amount < 0 and rounded != 0 else ""
    return f"{sign}{symbol} {grouped}"


def format_signed_amount(txn: Transaction, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format a transaction amount with "+" for income and "-" for expense."""
    prefix = "+" if txn.type == "income" else "-"
    return f"{prefix}{format_currency(txn.amount, symbol)}"


def sort_for_table(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Sort transactions newest first.

    Ties on date are broken by ID descending, so the most recently added
    entry of a day comes first.
    """
    return sorted(transactions, key=lambda t: (t.date, t.id), reverse=True)


def filter_by_type(transactions: Iterable[Transaction], txn_filter: str = "all") -> list[Transaction]:
    """Filter transactions by type.

    Args:
        transactions: Transactions to filter.
        txn_filter: "all", "income" or "expense".

    Returns:
        Matching transactions in their original order.
    """
    if txn_filter == "all":
        return list(transactions)
    return [t for t in transactions if t.type == txn_filter]


def table_rows(transactions: Iterable[Transaction], txn_filter: str = "all") -> list[Transaction]:
    """Sort and filter transactions for the transaction table."""
    return filter_by_type(sort_for_table(transactions), txn_filter)
