"""Pure functions for the light/dark display theme.

Charts never cache colours: every render calls chart_style() with the
current theme, so toggling the theme only requires a fresh render.
"""

from dataclasses import dataclass
from enum import Enum


class Theme(str, Enum):
    """Display theme, persisted as its plain string value."""

    LIGHT = "light"
    DARK = "dark"


DEFAULT_THEME = Theme.DARK


@dataclass(frozen=True)
class ChartStyle:
    """Immutable colour set for chart text, grid lines and series."""

    text: str
    grid: str
    income: str
    expense: str


_CHART_STYLES: dict[Theme, ChartStyle] = {
    Theme.DARK: ChartStyle(text="#8892a6", grid="#2a3142", income="#34d399", expense="#f87171"),
    Theme.LIGHT: ChartStyle(text="#334155", grid="#e2e8f0", income="#059669", expense="#dc2626"),
}


def parse_theme(value: str | None) -> Theme:
    """Parse a stored theme value.

    Args:
        value: Stored value, or None when nothing was stored.

    Returns:
        The matching Theme, or the dark default for anything unrecognised.
    """
    if value is None:
        return DEFAULT_THEME
    try:
        return Theme(value.strip().lower())
    except ValueError:
        return DEFAULT_THEME


def toggle_theme(theme: Theme) -> Theme:
    """Flip between light and dark."""
    return Theme.DARK if theme is Theme.LIGHT else Theme.LIGHT


def chart_style(theme: Theme) -> ChartStyle:
    """Get chart colours for a theme."""
    return _CHART_STYLES[theme]
