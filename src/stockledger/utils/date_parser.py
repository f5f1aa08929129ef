"""Date parsing utilities."""

import re
from datetime import date, timedelta
from dateutil import parser as date_parser

_WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
_DAYS_AGO = re.compile(r"^(\d+) days? ago$")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute and relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "3 days ago", "last friday"

    Args:
        date_str: Date string in various formats

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

    days_ago = _DAYS_AGO.match(date_str)
    if days_ago is not None:
        return today - timedelta(days=int(days_ago.group(1)))

    if date_str.startswith("last "):
        period = date_str[5:]
        if period in _WEEKDAYS:
            delta = (today.weekday() - _WEEKDAYS.index(period)) % 7
            if delta == 0:
                delta = 7
            return today - timedelta(days=delta)

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def to_ledger_date(date_str: str) -> str:
    """Parse a date string and render it in the ledger's YYYY-MM-DD form."""
    return parse_date(date_str).isoformat()
