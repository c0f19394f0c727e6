"""Income/expense aggregate model."""
from dataclasses import dataclass, field
from decimal import Decimal

from ..utils.amount_parser import amount_context
from .transaction import Transaction


@dataclass
class Totals:
    """Running income and expense totals for some scope (a month or all time)."""
    income: Decimal = field(default_factory=lambda: Decimal("0.00"))
    expense: Decimal = field(default_factory=lambda: Decimal("0.00"))

    @property
    def net(self) -> Decimal:
        """Income minus expense."""
        with amount_context():
            return self.income - self.expense

    def add(self, transaction: Transaction) -> None:
        """Accumulate one transaction; anything that is not income counts as expense."""
        with amount_context():
            if transaction.is_income:
                self.income += transaction.amount
            else:
                self.expense += transaction.amount
