"""Tests for sft.dates functions."""

from datetime import date

import pytest

from sft.dates import normalize_date, today_iso


class TestTodayIso:
    """Tests for today_iso."""

    def test_formats_given_date(self) -> None:
        """Should format as YYYY-MM-DD."""
        assert today_iso(date(2024, 3, 7)) == "2024-03-07"

    def test_defaults_to_current_date(self) -> None:
        """Should use today's date when none is given."""
        assert today_iso() == date.today().isoformat()


class TestNormalizeDate:
    """Tests for normalize_date."""

    def test_iso_date_unchanged(self) -> None:
        """Should keep ISO dates as they are."""
        assert normalize_date("2024-01-02") == "2024-01-02"

    def test_strips_whitespace(self) -> None:
        """Should ignore surrounding whitespace."""
        assert normalize_date("  2024-01-02 ") == "2024-01-02"

    def test_day_first_slashes(self) -> None:
        """Should read DD/MM/YYYY day first."""
        assert normalize_date("02/01/2024") == "2024-01-02"

    def test_day_first_dashes(self) -> None:
        """Should read DD-MM-YYYY day first."""
        assert normalize_date("25-12-2024") == "2024-12-25"

    def test_invalid_raises_valueerror(self) -> None:
        """Should raise ValueError for text that is not a date."""
        with pytest.raises(ValueError):
            normalize_date("not a date")
