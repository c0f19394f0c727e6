"""Tests for amount parser."""
from decimal import Decimal

from budget_tracker.utils.amount_parser import parse_amount, format_amount


class TestParseAmount:
    """Test amount parsing."""

    def test_parse_basic_amount(self):
        assert parse_amount("85.30") == Decimal("85.30")

    def test_parse_integer_gets_two_decimals(self):
        """Whole numbers are widened to two decimal places."""
        assert str(parse_amount("2500")) == "2500.00"

    def test_round_half_up(self):
        """Ties round away from zero, not to even."""
        assert parse_amount("12.505") == Decimal("12.51")
        assert parse_amount("2.675") == Decimal("2.68")
        assert parse_amount("0.125") == Decimal("0.13")

    def test_round_down_below_half(self):
        assert parse_amount("12.504") == Decimal("12.50")

    def test_negative_sign_preserved(self):
        assert parse_amount("-1.005") == Decimal("-1.01")

    def test_parse_with_whitespace(self):
        assert parse_amount("  42.1  ") == Decimal("42.10")

    def test_parse_exponent(self):
        assert parse_amount("1e3") == Decimal("1000.00")

    def test_parse_beyond_default_precision(self):
        """Amounts wider than 28 significant digits keep both decimals."""
        assert str(parse_amount("1e30")) == "1000000000000000000000000000000.00"
        assert str(parse_amount("12345678901234567890123456789.125")) == "12345678901234567890123456789.13"

    def test_parse_empty_string(self):
        assert parse_amount("") is None
        assert parse_amount("   ") is None

    def test_parse_none(self):
        assert parse_amount(None) is None

    def test_parse_invalid_format(self):
        assert parse_amount("abc") is None
        assert parse_amount("12,50") is None
        assert parse_amount("£12.50") is None

    def test_non_finite_rejected(self):
        assert parse_amount("NaN") is None
        assert parse_amount("Infinity") is None


class TestFormatAmount:
    """Test amount formatting."""

    def test_format_two_decimals(self):
        assert format_amount(Decimal("85.3")) == "85.30"

    def test_format_no_grouping(self):
        assert format_amount(Decimal("1234567.89")) == "1234567.89"

    def test_format_zero(self):
        assert format_amount(Decimal("0")) == "0.00"

    def test_format_large_amount(self):
        assert format_amount(Decimal("1e30")) == "1000000000000000000000000000000.00"

    def test_format_negative(self):
        assert format_amount(Decimal("-12.5")) == "-12.50"
