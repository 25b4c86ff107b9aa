"""Savings goal commands."""

import sqlite3
import sys

from rich.console import Console

from sft.commands.dashboard import render_goal
from sft.config import load_settings
from sft.domain.ledger import set_goal
from sft.domain.summary import build_summary
from sft.domain.theme import chart_style
from sft.store import queries

console = Console()


def set_goal_command(name: str, target: str) -> None:
    """Set or replace the savings goal.

    Args:
        name: Goal name.
        target: Target amount in rupiah.
    """
    settings = load_settings()

    try:
        ledger = queries.load_ledger(settings.db_path)
        updated = set_goal(ledger, name, target)

        if updated is ledger or updated.goal is None:
            console.print("[yellow]Goal not set: name must not be empty and target must be a positive number[/yellow]")
            sys.exit(1)

        queries.save_goal(updated.goal, settings.db_path)

    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Savings goal set: {updated.goal.name}")
    panel = render_goal(build_summary(updated), chart_style(updated.theme), settings.currency_symbol)
    if panel is not None:
        console.print(panel)


def clear_goal_command() -> None:
    """Remove the savings goal."""
    settings = load_settings()

    try:
        goal = queries.load_goal(settings.db_path)
        if goal is None:
            console.print("[dim]No savings goal set[/dim]")
            return

        queries.clear_goal(settings.db_path)

    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Savings goal cleared: {goal.name}")
