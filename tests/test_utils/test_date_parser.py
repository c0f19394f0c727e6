"""Tests for date parser."""
from datetime import date

from budget_tracker.utils.date_parser import parse_date, format_date, month_key


def test_parse_iso_date():
    assert parse_date("2025-09-05") == date(2025, 9, 5)


def test_parse_strips_whitespace():
    assert parse_date(" 2025-09-05 ") == date(2025, 9, 5)


def test_parse_invalid_dates():
    assert parse_date("05/09/2025") is None
    assert parse_date("2025-13-01") is None
    assert parse_date("2025-02-30") is None
    assert parse_date("") is None
    assert parse_date(None) is None


def test_format_date_zero_pads():
    assert format_date(date(2025, 1, 2)) == "2025-01-02"


def test_month_key():
    assert month_key(date(2025, 1, 31)) == "2025-01"
    assert month_key(date(2024, 12, 1)) == "2024-12"
