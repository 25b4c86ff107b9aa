"""Date utilities for sft.

Functions for the default form date and lenient date parsing.
"""

from datetime import date

import pandas as pd

from sft.domain.models import IsoDate


def today_iso(today: date | None = None) -> IsoDate:
    """Get today's date in YYYY-MM-DD format.

    Args:
        today: Date to format. If None, uses the current local date.
    """
    if today is None:
        today = date.today()
    return IsoDate(today.isoformat())


def normalize_date(value: str) -> IsoDate:
    """Normalize a user-entered date to YYYY-MM-DD.

    ISO dates are taken as-is; other formats are read day-first
    (e.g. 02/01/2024 is 2 January 2024).

    Args:
        value: Date string in YYYY-MM-DD, DD/MM/YYYY, DD-MM-YYYY or similar.

    Returns:
        Normalized date.

    Raises:
        ValueError: If the value cannot be parsed as a date.
    """
    value = value.strip()
    try:
        return IsoDate(date.fromisoformat(value).isoformat())
    except ValueError:
        pass

    parsed = pd.to_datetime(value, dayfirst=True, errors="coerce")
    if pd.isna(parsed):
        raise ValueError(f"Unrecognised date: {value!r}")
    return IsoDate(parsed.strftime("%Y-%m-%d"))
