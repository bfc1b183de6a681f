"""Date parsing utilities."""

import os
from datetime import date, datetime, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil import tz
from dateutil.relativedelta import relativedelta

DEFAULT_TIMEZONE = "America/Sao_Paulo"


def reference_timezone(name: Optional[str] = None):
    """Return the timezone used to decide what "today" is.

    Args:
        name: IANA timezone name. If None, checks MULTILUZ_TIMEZONE
            environment variable, then defaults to America/Sao_Paulo

    Raises:
        ValueError: If the timezone name is unknown
    """
    if name is None:
        name = os.environ.get("MULTILUZ_TIMEZONE", DEFAULT_TIMEZONE)
    zone = tz.gettz(name)
    if zone is None:
        raise ValueError(f"Unknown timezone '{name}'")
    return zone


def current_date(timezone_name: Optional[str] = None) -> date:
    """Return today's calendar date in the reference timezone."""
    return datetime.now(reference_timezone(timezone_name)).date()


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "15/01/2024") and the relative
    forms "today", "yesterday" and "tomorrow". Day-first formats are
    preferred when a date is ambiguous.

    Args:
        date_str: Date string
        today: Reference date for relative forms (defaults to current_date())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    if today is None:
        today = current_date()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        # ISO dates are unambiguous; everything else is read day-first
        if len(date_str) == 10 and date_str[4] == "-":
            return date.fromisoformat(date_str)
        return date_parser.parse(date_str, dayfirst=True).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_month(month_str: Optional[str], today: Optional[date] = None) -> tuple[int, int]:
    """Parse a reference month into a (month, year) pair.

    Accepts "2024-03", "03/2024", "this month" and "last month". None means
    the current month.

    Raises:
        ValueError: If the month cannot be parsed
    """
    if today is None:
        today = current_date()
    if month_str is None:
        return today.month, today.year

    value = month_str.strip().lower()
    if value in ("this month", "this-month"):
        return today.month, today.year
    if value in ("last month", "last-month"):
        previous = today - relativedelta(months=1)
        return previous.month, previous.year

    for fmt in ("%Y-%m", "%m/%Y"):
        try:
            parsed = datetime.strptime(value, fmt)
            return parsed.month, parsed.year
        except ValueError:
            continue
    raise ValueError(f"Could not parse month '{month_str}'. Use YYYY-MM or MM/YYYY")
