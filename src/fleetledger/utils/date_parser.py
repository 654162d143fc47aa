"""Date parsing utilities."""

from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser


def parse_date(date_str: str, dayfirst: bool = False) -> date:
    """Parse a date string into a date object.

    Supports:
    - ISO dates: "2024-06-01"
    - Other absolute dates dateutil understands: "01/06/2024", "June 1, 2024"
    - Relative dates: "today", "yesterday", "tomorrow"

    Args:
        date_str: Date string in various formats
        dayfirst: Read ambiguous numeric dates as day/month/year

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    # ISO first: dateutil applies dayfirst even to year-first strings
    try:
        return date.fromisoformat(date_str)
    except ValueError:
        pass

    try:
        dt = date_parser.parse(date_str, dayfirst=dayfirst)
        return dt.date()
    except (ValueError, OverflowError, TypeError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_date_or_none(date_str: Optional[str], dayfirst: bool = False) -> Optional[date]:
    """Parse a date string, returning None for empty or unparsable input."""
    if not date_str or not date_str.strip():
        return None
    try:
        return parse_date(date_str, dayfirst=dayfirst)
    except ValueError:
        return None
