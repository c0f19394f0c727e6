"""Date parsing for ledger records."""
from datetime import date, datetime
from typing import Optional

from ..config.settings import DATE_FORMAT, MONTH_FORMAT


def parse_date(date_string: str) -> Optional[date]:
    """
    Parse an ISO calendar date (YYYY-MM-DD).

    Args:
        date_string: String containing the date

    Returns:
        date object or None if parsing fails
    """
    if not date_string or not isinstance(date_string, str):
        return None

    date_string = date_string.strip()
    if not date_string:
        return None

    try:
        return datetime.strptime(date_string, DATE_FORMAT).date()
    except ValueError:
        return None


def format_date(value: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return value.strftime(DATE_FORMAT)


def month_key(value: date) -> str:
    """Year-month key (YYYY-MM) used for filtering and grouping."""
    return value.strftime(MONTH_FORMAT)
