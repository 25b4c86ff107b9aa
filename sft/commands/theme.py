"""Theme command for switching between light and dark mode."""

import sqlite3
import sys

from rich.console import Console

from sft.commands.dashboard import render_charts
from sft.config import load_settings
from sft.domain.ledger import toggle_ledger_theme
from sft.domain.summary import build_summary
from sft.store.queries import load_ledger, save_theme

console = Console()


def theme_command(toggle: bool = False) -> None:
    """Show the current theme, or toggle it and redraw the charts.

    Args:
        toggle: Flip between light and dark and persist the new value.
    """
    settings = load_settings()

    try:
        ledger = load_ledger(settings.db_path)

        if not toggle:
            console.print(f"Theme: [bold]{ledger.theme.value}[/bold]")
            return

        ledger = toggle_ledger_theme(ledger)
        save_theme(ledger.theme, settings.db_path)

    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓[/green] Theme switched to [bold]{ledger.theme.value}[/bold]")

    # Chart colours depend on the theme, so redraw them from scratch
    for panel in render_charts(build_summary(ledger), ledger.theme, settings.currency_symbol, settings.chart_width):
        console.print(panel)
