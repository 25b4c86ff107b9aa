"""Tests for sft.domain.theme pure functions."""

from sft.domain.theme import Theme, chart_style, parse_theme, toggle_theme


class TestParseTheme:
    """Tests for parse_theme."""

    def test_defaults_to_dark(self) -> None:
        """Should use dark when nothing is stored."""
        assert parse_theme(None) is Theme.DARK

    def test_known_values(self) -> None:
        """Should parse stored strings."""
        assert parse_theme("light") is Theme.LIGHT
        assert parse_theme("dark") is Theme.DARK
        assert parse_theme(" Light ") is Theme.LIGHT

    def test_unknown_value_falls_back_to_dark(self) -> None:
        """Should ignore unrecognised values."""
        assert parse_theme("sepia") is Theme.DARK
        assert parse_theme("") is Theme.DARK


class TestToggleTheme:
    """Tests for toggle_theme."""

    def test_flips(self) -> None:
        """Should switch between light and dark."""
        assert toggle_theme(Theme.DARK) is Theme.LIGHT
        assert toggle_theme(Theme.LIGHT) is Theme.DARK


class TestChartStyle:
    """Tests for chart_style."""

    def test_text_colours_follow_theme(self) -> None:
        """Should use the theme's chart text colour."""
        assert chart_style(Theme.DARK).text == "#8892a6"
        assert chart_style(Theme.LIGHT).text == "#334155"

    def test_grid_differs_between_themes(self) -> None:
        """Should give each theme its own grid colour."""
        assert chart_style(Theme.DARK).grid != chart_style(Theme.LIGHT).grid
