"""Transaction management commands (add, delete, list, categories)."""

import sqlite3
import sys

from rich.columns import Columns
from rich.console import Console

from sft.commands.dashboard import render_transaction_table
from sft.config import load_settings
from sft.dates import normalize_date, today_iso
from sft.domain.formatting import format_signed_amount
from sft.domain.ledger import add_transaction, create_transaction, find_transaction, remove_transaction
from sft.domain.models import TRANSACTION_TYPES, categories_for
from sft.domain.theme import chart_style
from sft.store.queries import load_ledger, save_transactions

console = Console()


def add_command(
    txn_type: str,
    amount: float,
    category: str,
    date: str | None = None,
    desc: str = "",
) -> None:
    """Add a transaction.

    Args:
        txn_type: "income" or "expense".
        amount: Amount in rupiah.
        category: Category name from the type's vocabulary.
        date: Transaction date (YYYY-MM-DD, DD/MM/YYYY, ...). Defaults to today.
        desc: Optional description.
    """
    settings = load_settings()

    try:
        normalized_date = normalize_date(date) if date else today_iso()
    except ValueError as e:
        console.print(f"[red]Invalid date format: {e}[/red]")
        console.print("[dim]Accepted formats: YYYY-MM-DD, DD/MM/YYYY, DD-MM-YYYY, etc.[/dim]")
        sys.exit(1)

    txn, error = create_transaction(txn_type.lower(), amount, category, normalized_date, desc)
    if txn is None:
        console.print(f"[red]{error}[/red]")
        if txn_type.lower() in TRANSACTION_TYPES:
            console.print(f"[dim]Run 'sft categories {txn_type.lower()}' to see valid categories[/dim]")
        sys.exit(1)

    try:
        ledger = add_transaction(load_ledger(settings.db_path), txn)
        save_transactions(ledger.transactions, settings.db_path)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Transaction added:")
    console.print(f"  ID: {txn.id}")
    console.print(f"  Date: {txn.date}")
    console.print(f"  Category: {txn.category}")
    if txn.desc:
        console.print(f"  Description: {txn.desc}")
    console.print(f"  Amount: {format_signed_amount(txn, settings.currency_symbol)}")


def delete_command(txn_id: str) -> None:
    """Delete a transaction by ID.

    Args:
        txn_id: Transaction ID (from 'sft list' or 'sft dashboard').
    """
    settings = load_settings()

    try:
        ledger = load_ledger(settings.db_path)
        txn = find_transaction(ledger, txn_id)

        if txn is None:
            console.print(f"[yellow]Transaction {txn_id} not found[/yellow]")
            return

        ledger = remove_transaction(ledger, txn_id)
        save_transactions(ledger.transactions, settings.db_path)

    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Deleted transaction {txn_id}:")
    console.print(f"  {txn.date}  {txn.category}  {format_signed_amount(txn, settings.currency_symbol)}")


def list_command(txn_filter: str | None = None) -> None:
    """List transactions, newest first."""
    settings = load_settings()
    txn_filter = txn_filter or settings.default_filter

    try:
        ledger = load_ledger(settings.db_path)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    style = chart_style(ledger.theme)
    console.print(render_transaction_table(ledger.transactions, txn_filter, style, settings.currency_symbol))


def categories_command(txn_type: str | None = None) -> None:
    """Show the category vocabulary for one or both transaction types."""
    types = [txn_type.lower()] if txn_type else list(TRANSACTION_TYPES)

    for name in types:
        categories = categories_for(name)
        if not categories:
            console.print(f"[red]Unknown transaction type '{name}' (expected income or expense)[/red]")
            sys.exit(1)
        console.print(f"[cyan]{name.capitalize()} categories:[/cyan]")
        console.print(Columns(list(categories), equal=True, expand=False, column_first=True))
        console.print()
