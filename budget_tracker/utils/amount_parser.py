"""Parse and format ledger amounts."""
import logging
from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Optional

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")

# Significant digits for amount arithmetic (decimal default is 28)
AMOUNT_PRECISION = 60


def amount_context():
    """Decimal context manager used for all amount arithmetic."""
    return localcontext(Context(prec=AMOUNT_PRECISION, rounding=ROUND_HALF_UP))


def quantize_amount(amount: Decimal) -> Decimal:
    """Narrow an amount to two decimal places, rounding ties away from zero."""
    with amount_context():
        return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def parse_amount(amount_string: str) -> Optional[Decimal]:
    """
    Parse a plain decimal amount.

    Accepts what ``decimal.Decimal`` accepts for finite numbers
    ("12", "12.5", "-3.40", "1e3"). No currency symbols or grouping
    separators. The sign is preserved.

    Args:
        amount_string: String containing the amount

    Returns:
        Decimal rounded half-up to two places, or None if parsing fails
    """
    if not amount_string or not isinstance(amount_string, str):
        return None

    cleaned = amount_string.strip()
    if not cleaned:
        return None

    try:
        amount = Decimal(cleaned)
        if not amount.is_finite():
            return None
        return quantize_amount(amount)
    except InvalidOperation:
        logger.debug(f"Could not parse amount: {amount_string}")
        return None


def format_amount(amount: Decimal) -> str:
    """
    Format an amount with exactly two decimals and no grouping separators.

    Args:
        amount: Numeric amount

    Returns:
        Formatted amount string, e.g. "2500.00"
    """
    return f"{quantize_amount(Decimal(amount)):f}"
