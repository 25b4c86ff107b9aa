"""Pure functions for totals, breakdowns and goal progress.

This module contains the functional core for the dashboard:
- No I/O operations (no database, no console, no files)
- No side effects
- Everything is recomputed from the transaction list on each call
- Chart data is plain labels and numbers, independent of any renderer

All amounts are in rupiah (Amount type).
"""

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from sft.domain.formatting import DEFAULT_CURRENCY_SYMBOL, format_currency
from sft.domain.ledger import Ledger, SavingsGoal, Transaction
from sft.domain.models import PIE_COLORS, Amount, CategoryName


@dataclass(frozen=True)
class Totals:
    """Immutable income, expense and balance totals."""

    income: Amount
    expense: Amount
    balance: Amount


@dataclass(frozen=True)
class GoalProgress:
    """Immutable savings goal progress."""

    saved: Amount
    remaining: Amount
    percent: float


@dataclass(frozen=True)
class CategoryChartData:
    """Immutable category breakdown chart data (one slice per category)."""

    labels: tuple[CategoryName, ...]
    values: tuple[Amount, ...]
    colors: tuple[str, ...]

    @property
    def is_empty(self) -> bool:
        return not self.labels


@dataclass(frozen=True)
class ComparisonChartData:
    """Immutable income vs expense chart data (always two bars)."""

    labels: tuple[str, str]
    values: tuple[Amount, Amount]


@dataclass(frozen=True)
class DashboardSummary:
    """Immutable bundle of everything the dashboard renders."""

    totals: Totals
    balance_percent: float
    overspend: bool
    category_chart: CategoryChartData
    comparison_chart: ComparisonChartData
    goal: SavingsGoal | None
    goal_progress: GoalProgress | None


def calculate_totals(transactions: Iterable[Transaction]) -> Totals:
    """Calculate income, expense and balance.

    Args:
        transactions: Transactions to total.

    Returns:
        Totals where balance = income - expense.
    """
    income = 0.0
    expense = 0.0
    for txn in transactions:
        if txn.type == "income":
            income += txn.amount
        elif txn.type == "expense":
            expense += txn.amount
    return Totals(income=Amount(income), expense=Amount(expense), balance=Amount(income - expense))


def balance_percent(totals: Totals) -> float:
    """Calculate the share of income still remaining.

    Args:
        totals: Current totals.

    Returns:
        Percentage clamped to 0-100, or 0 when there is no income.
    """
    if totals.income <= 0:
        return 0.0
    return max(0.0, min(100.0, (totals.balance / totals.income) * 100))


def expense_by_category(transactions: Iterable[Transaction]) -> dict[CategoryName, Amount]:
    """Sum expenses per category.

    Args:
        transactions: Transactions to group.

    Returns:
        Dictionary of category totals in first-seen order. Categories with
        no expense entries are absent.
    """
    grouped: dict[CategoryName, Amount] = {}
    for txn in transactions:
        if txn.type != "expense":
            continue
        grouped[txn.category] = Amount(grouped.get(txn.category, 0) + txn.amount)
    return grouped


def overspend_alert(totals: Totals) -> bool:
    """Check whether spending exceeds income.

    A ledger with no income never triggers the alert.
    """
    return totals.expense > totals.income and totals.income > 0


def goal_progress(goal: SavingsGoal, totals: Totals) -> GoalProgress:
    """Calculate progress towards a savings goal.

    Args:
        goal: Savings goal with a positive target.
        totals: Current totals; only a positive balance counts as saved.

    Returns:
        GoalProgress with percent capped at 100. Remaining goes negative
        once the target is exceeded.
    """
    saved = max(0.0, totals.balance)
    percent = min(100.0, (saved / goal.target) * 100)
    return GoalProgress(saved=Amount(saved), remaining=Amount(goal.target - saved), percent=percent)


def goal_note(progress: GoalProgress, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Describe goal progress in one line."""
    if progress.percent >= 100:
        return "🎉 Congratulations! You've reached your savings goal!"
    remaining = format_currency(progress.remaining, symbol)
    return f"{remaining} remaining to reach your goal ({progress.percent:.1f}% saved)."


def palette_colors(count: int, palette: Sequence[str] = PIE_COLORS) -> tuple[str, ...]:
    """Pick ``count`` colours from the palette, cycling when it runs out."""
    return tuple(palette[i % len(palette)] for i in range(count))


def category_chart_data(transactions: Iterable[Transaction]) -> CategoryChartData:
    """Build category breakdown chart data from expense transactions."""
    grouped = {cat: amt for cat, amt in expense_by_category(transactions).items() if amt != 0}
    return CategoryChartData(
        labels=tuple(grouped.keys()),
        values=tuple(grouped.values()),
        colors=palette_colors(len(grouped)),
    )


def comparison_chart_data(totals: Totals) -> ComparisonChartData:
    """Build income vs expense chart data."""
    return ComparisonChartData(labels=("Income", "Expense"), values=(totals.income, totals.expense))


def calculate_histogram_bar_length(amount: float, max_amount: float, bar_width: int) -> int:
    """Calculate chart bar length.

    Args:
        amount: Amount to display.
        max_amount: Maximum amount in dataset.
        bar_width: Maximum bar width in characters.

    Returns:
        Bar length in characters.
    """
    if max_amount <= 0 or math.isnan(max_amount):
        return 0
    if math.isinf(max_amount):
        return bar_width if math.isinf(amount) else 0
    return min(bar_width, int((abs(amount) / max_amount) * bar_width))


def build_summary(ledger: Ledger) -> DashboardSummary:
    """Compute everything the dashboard shows for a ledger."""
    totals = calculate_totals(ledger.transactions)
    progress = goal_progress(ledger.goal, totals) if ledger.goal else None
    return DashboardSummary(
        totals=totals,
        balance_percent=balance_percent(totals),
        overspend=overspend_alert(totals),
        category_chart=category_chart_data(ledger.transactions),
        comparison_chart=comparison_chart_data(totals),
        goal=ledger.goal,
        goal_progress=progress,
    )
