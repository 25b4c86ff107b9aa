"""CLI entry point for sft."""

import typer

from sft.commands.admin import config_command, init_command
from sft.commands.dashboard import dashboard_command
from sft.commands.goal import clear_goal_command, set_goal_command
from sft.commands.theme import theme_command
from sft.commands.transactions import add_command, categories_command, delete_command, list_command
from sft.domain.formatting import TABLE_FILTERS
from sft.log import setup_logging

app = typer.Typer(
    name="sft",
    help="Student Finance Tracker - track income, expenses and a savings goal",
    add_completion=False,
)


def _check_filter(value: str | None) -> str | None:
    if value is not None and value not in TABLE_FILTERS:
        raise typer.BadParameter(f"must be one of: {', '.join(TABLE_FILTERS)}")
    return value


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show diagnostic log messages"),
) -> None:
    """Student Finance Tracker - track income, expenses and a savings goal."""
    setup_logging(verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Rewrite the default config file"),
) -> None:
    """Initialize sft database and configuration."""
    init_command(force)


@app.command(name="config")
def config(
    key: str = typer.Argument(None, help="Config key: currency_symbol, chart_width, default_filter or db_path"),
    value: str = typer.Argument(None, help="New value for the key"),
) -> None:
    """Show settings, or change one config value."""
    config_command(key, value)


@app.command()
def add(
    txn_type: str = typer.Argument(..., metavar="TYPE", help="income or expense"),
    amount: float = typer.Argument(..., help="Amount in rupiah"),
    category: str = typer.Argument(..., help="Category (see 'sft categories')"),
    date: str = typer.Option(None, "--date", "-d", help="Transaction date (default: today)"),
    desc: str = typer.Option("", "--desc", help="Optional description"),
) -> None:
    """Add an income or expense transaction."""
    add_command(txn_type, amount, category, date, desc)


@app.command()
def delete(
    txn_id: str = typer.Argument(..., metavar="ID", help="Transaction ID"),
) -> None:
    """Delete a transaction."""
    delete_command(txn_id)


@app.command(name="list")
def list_transactions(
    txn_filter: str = typer.Option(
        None, "--type", "-t", help="Filter: all, income or expense", callback=_check_filter
    ),
) -> None:
    """List your transactions, newest first."""
    list_command(txn_filter)


@app.command()
def categories(
    txn_type: str = typer.Argument(None, metavar="[TYPE]", help="income or expense (default: both)"),
) -> None:
    """Show the available categories."""
    categories_command(txn_type)


@app.command()
def dashboard(
    txn_filter: str = typer.Option(
        None, "--type", "-t", help="Filter: all, income or expense", callback=_check_filter
    ),
    hide_alert: bool = typer.Option(False, "--hide-alert", help="Dismiss the overspending alert"),
) -> None:
    """Show totals, transactions, charts and goal progress."""
    dashboard_command(txn_filter, hide_alert)


@app.command(name="set-goal")
def set_goal(
    name: str = typer.Argument(..., help="Goal name"),
    target: str = typer.Argument(..., help="Target amount in rupiah"),
) -> None:
    """Set your savings goal."""
    set_goal_command(name, target)


@app.command(name="clear-goal")
def clear_goal() -> None:
    """Clear your savings goal."""
    clear_goal_command()


@app.command()
def theme(
    toggle: bool = typer.Option(False, "--toggle", help="Switch between light and dark"),
) -> None:
    """Show or toggle the display theme."""
    theme_command(toggle)


if __name__ == "__main__":
    app()
