"""Date parsing utilities."""

import re
from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from fleetledger.utils.months import month_key, normalize_month

_AGO = re.compile(r"^(\d+)\s+(day|week|month)s?\s+ago$")


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports:
    - Absolute dates: "2025-01-15", "January 15, 2025", etc.
    - Relative dates: "today", "yesterday", "this month", "last month",
      "15 days ago", "2 months ago"

    Args:
        date_str: Date string in various formats
        today: Reference date for relative forms (defaults to today)

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = today or date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "this month": today.replace(day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    match = _AGO.match(date_str)
    if match:
        count, unit = int(match.group(1)), match.group(2)
        if unit == "day":
            return today - timedelta(days=count)
        if unit == "week":
            return today - timedelta(weeks=count)
        return today - relativedelta(months=count)

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_month(month_str: str, today: Optional[date] = None) -> str:
    """Parse a month option ("2025-03", "this month", "last month") into ``YYYY-MM``."""
    cleaned = month_str.strip().lower()
    if cleaned in ("this month", "last month"):
        return month_key(parse_date(cleaned, today=today))
    return normalize_month(cleaned)
