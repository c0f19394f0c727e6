"""Month filtering and income/expense aggregation."""
from typing import Dict, List, Optional

from ..models import Totals, Transaction


def filter_by_month(
    transactions: List[Transaction],
    month: Optional[str] = None
) -> List[Transaction]:
    """
    Keep transactions whose year-month key equals ``month`` exactly.

    This is plain string comparison, so a malformed filter matches nothing.

    Args:
        transactions: Transactions in file order
        month: YYYY-MM filter, or None for no filtering

    Returns:
        Matching transactions, order preserved
    """
    if month is None:
        return list(transactions)
    return [t for t in transactions if t.month_key == month]


def summarize(transactions: List[Transaction]) -> Totals:
    """Total income and expense across the given transactions."""
    totals = Totals()
    for txn in transactions:
        totals.add(txn)
    return totals


def monthly_balance(transactions: List[Transaction]) -> Dict[str, Totals]:
    """
    Group totals by year-month.

    Returns:
        Mapping of YYYY-MM to totals, in ascending key order
    """
    months: Dict[str, Totals] = {}
    for txn in transactions:
        months.setdefault(txn.month_key, Totals()).add(txn)
    return {key: months[key] for key in sorted(months)}
