"""Dashboard command: summary cards, transaction table, charts and goal.

Every render builds new rich objects from the current ledger. Nothing is
cached between renders, so a theme change or data change only needs a
fresh call.
"""

import sqlite3
import sys

from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from sft.config import Settings, load_settings
from sft.domain.formatting import format_currency, format_signed_amount, table_rows
from sft.domain.ledger import Ledger, Transaction
from sft.domain.summary import (
    CategoryChartData,
    ComparisonChartData,
    DashboardSummary,
    build_summary,
    calculate_histogram_bar_length,
    goal_note,
)
from sft.domain.theme import ChartStyle, Theme, chart_style
from sft.store.queries import load_ledger

console = Console()

BAR_CHAR = "█"


def render_summary(summary: DashboardSummary, style: ChartStyle, symbol: str) -> Panel:
    """Render balance, income and expense cards with the balance bar."""
    totals = summary.totals
    balance_style = f"bold {style.expense}" if totals.balance < 0 else "bold"

    cards = Table.grid(expand=True, padding=(0, 2))
    cards.add_column()
    cards.add_column()
    cards.add_column()
    cards.add_row(
        Text("Balance", style=style.text),
        Text("Income", style=style.text),
        Text("Expense", style=style.text),
    )
    cards.add_row(
        Text(format_currency(totals.balance, symbol), style=balance_style),
        Text(format_currency(totals.income, symbol), style=f"bold {style.income}"),
        Text(format_currency(totals.expense, symbol), style=f"bold {style.expense}"),
    )

    bar = ProgressBar(
        total=100,
        completed=summary.balance_percent,
        complete_style=style.income,
        finished_style=style.income,
        style=style.grid,
    )
    caption = Text(f"{summary.balance_percent:.0f}% of income remaining", style=style.text)

    return Panel(Group(cards, bar, caption), title="Summary", border_style=style.grid)


def render_alert(summary: DashboardSummary, hide_alert: bool = False) -> Panel | None:
    """Render the overspending banner, or None when it should not show."""
    if hide_alert or not summary.overspend:
        return None
    return Panel(
        Text("⚠ Your expenses exceed your income!", style="bold"),
        border_style="red",
        style="red",
    )


def render_transaction_table(
    transactions: tuple[Transaction, ...] | list[Transaction],
    txn_filter: str,
    style: ChartStyle,
    symbol: str,
) -> RenderableType:
    """Render transactions newest first, optionally filtered by type."""
    rows = table_rows(transactions, txn_filter)

    if not rows:
        return Text("No transactions yet", style=f"dim {style.text}")

    table = Table(title=f"Transactions ({len(rows)})", border_style=style.grid)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Type", justify="center")
    table.add_column("Category", style="magenta")
    table.add_column("Description")
    table.add_column("Amount", justify="right", no_wrap=True)

    for txn in rows:
        colour = style.income if txn.type == "income" else style.expense
        table.add_row(
            txn.id,
            txn.date,
            Text(txn.type, style=colour),
            txn.category,
            txn.desc or "—",
            Text(format_signed_amount(txn, symbol), style=colour),
        )

    return table


def render_category_chart(data: CategoryChartData, style: ChartStyle, symbol: str, bar_width: int) -> Panel:
    """Render expense categories as coloured horizontal bars."""
    if data.is_empty:
        body: RenderableType = Text("No expense data", style=f"dim {style.text}")
        return Panel(body, title="Expenses by Category", border_style=style.grid)

    total = sum(data.values)
    max_amount = max(data.values)

    chart = Table.grid(padding=(0, 1))
    chart.add_column(no_wrap=True)
    chart.add_column(justify="right", no_wrap=True)
    chart.add_column(no_wrap=True)
    chart.add_column(justify="right", no_wrap=True)

    for label, value, colour in zip(data.labels, data.values, data.colors):
        bar_length = calculate_histogram_bar_length(value, max_amount, bar_width)
        share = (value / total) * 100 if total else 0
        chart.add_row(
            Text(label, style=style.text),
            Text(format_currency(value, symbol), style=style.text),
            Text(BAR_CHAR * bar_length, style=colour),
            Text(f"{share:.0f}%", style=style.text),
        )

    return Panel(chart, title="Expenses by Category", border_style=style.grid)


def render_comparison_chart(data: ComparisonChartData, style: ChartStyle, symbol: str, bar_width: int) -> Panel:
    """Render income and expense totals as two bars."""
    max_amount = max(data.values)

    chart = Table.grid(padding=(0, 1))
    chart.add_column(no_wrap=True)
    chart.add_column(no_wrap=True)
    chart.add_column(justify="right", no_wrap=True)

    colours = (style.income, style.expense)
    for label, value, colour in zip(data.labels, data.values, colours):
        bar_length = calculate_histogram_bar_length(value, max_amount, bar_width)
        chart.add_row(
            Text(label, style=style.text),
            Text(BAR_CHAR * bar_length, style=colour) + Text("┊" * (bar_width - bar_length), style=style.grid),
            Text(format_currency(value, symbol), style=style.text),
        )

    return Panel(chart, title="Income vs Expense", border_style=style.grid)


def render_charts(summary: DashboardSummary, theme: Theme, symbol: str, bar_width: int) -> list[Panel]:
    """Render both charts with colours derived from the theme."""
    style = chart_style(theme)
    return [
        render_category_chart(summary.category_chart, style, symbol, bar_width),
        render_comparison_chart(summary.comparison_chart, style, symbol, bar_width),
    ]


def render_goal(summary: DashboardSummary, style: ChartStyle, symbol: str) -> Panel | None:
    """Render savings goal progress, or None when no goal is set."""
    if summary.goal is None or summary.goal_progress is None:
        return None

    progress = summary.goal_progress
    reached = progress.percent >= 100
    bar_colour = "#2dd4bf" if reached else style.income

    body = Group(
        Text(
            f"{format_currency(progress.saved, symbol)} / {format_currency(summary.goal.target, symbol)}",
            style=style.text,
        ),
        ProgressBar(
            total=100,
            completed=progress.percent,
            complete_style=bar_colour,
            finished_style=bar_colour,
            style=style.grid,
        ),
        Text(goal_note(progress, symbol), style=style.text),
    )
    return Panel(body, title=f"Savings Goal: {summary.goal.name}", border_style=style.grid)


def render_dashboard(
    ledger: Ledger,
    settings: Settings,
    txn_filter: str = "all",
    hide_alert: bool = False,
) -> list[RenderableType]:
    """Render the whole dashboard for a ledger.

    Args:
        ledger: Current ledger.
        settings: Resolved settings (currency symbol, chart width).
        txn_filter: Transaction table filter: "all", "income" or "expense".
        hide_alert: Dismiss the overspending banner for this render.

    Returns:
        Renderables in display order.
    """
    summary = build_summary(ledger)
    style = chart_style(ledger.theme)
    symbol = settings.currency_symbol

    parts: list[RenderableType] = [render_summary(summary, style, symbol)]

    alert = render_alert(summary, hide_alert)
    if alert is not None:
        parts.append(alert)

    parts.append(render_transaction_table(ledger.transactions, txn_filter, style, symbol))
    parts.extend(render_charts(summary, ledger.theme, symbol, settings.chart_width))

    goal = render_goal(summary, style, symbol)
    if goal is not None:
        parts.append(goal)

    return parts


def dashboard_command(txn_filter: str | None = None, hide_alert: bool = False) -> None:
    """Show the full dashboard."""
    settings = load_settings()
    txn_filter = txn_filter or settings.default_filter

    try:
        ledger = load_ledger(settings.db_path)
    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)

    for part in render_dashboard(ledger, settings, txn_filter, hide_alert):
        console.print(part)
