"""Transaction data model."""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Sequence

from ..exceptions import ValidationError
from ..utils.amount_parser import format_amount, parse_amount
from ..utils.date_parser import format_date, parse_date
from ..utils.date_parser import month_key as _month_key

FIELD_COUNT = 5
DELIMITER = ","


class TransactionType(str, Enum):
    """Transaction type enumeration."""
    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def parse(cls, text: str) -> "TransactionType":
        """Parse a user-supplied type keyword, case-insensitively."""
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise ValidationError("Type must be income or expense") from None


# Characters that would split one record across fields or lines
_FIELD_BREAKS = str.maketrans({DELIMITER: " ", "\n": " ", "\r": " "})


def _clean_field(value: str) -> str:
    return value.translate(_FIELD_BREAKS)


@dataclass(frozen=True)
class Transaction:
    """
    Represents a single ledger entry.

    Attributes:
        date: Calendar date of the entry
        transaction_type: "income" or "expense" (stored value kept as read)
        category: Free-text category label
        amount: Amount with exactly two decimal places
        note: Free-text note
    """
    date: date
    transaction_type: str
    category: str
    amount: Decimal
    note: str = ""

    @property
    def is_income(self) -> bool:
        return self.transaction_type == TransactionType.INCOME.value

    @property
    def is_expense(self) -> bool:
        return self.transaction_type == TransactionType.EXPENSE.value

    @property
    def month_key(self) -> str:
        """Year-month key (YYYY-MM) of the entry date."""
        return _month_key(self.date)

    def to_csv(self) -> str:
        """Serialize to one ledger line (without the trailing newline)."""
        return DELIMITER.join([
            format_date(self.date),
            self.transaction_type,
            _clean_field(self.category),
            format_amount(self.amount),
            _clean_field(self.note),
        ])

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "Transaction":
        """
        Build a transaction from the five fields of a ledger line.

        Args:
            fields: date, type, category, amount, note

        Returns:
            Parsed transaction

        Raises:
            ValueError: If there are not five fields, or the date or
                amount cannot be parsed
        """
        if len(fields) < FIELD_COUNT:
            raise ValueError(f"expected {FIELD_COUNT} fields, got {len(fields)}")

        raw_date, raw_type, category, raw_amount, note = (f.strip() for f in fields[:FIELD_COUNT])

        parsed_date = parse_date(raw_date)
        if parsed_date is None:
            raise ValueError(f"invalid date {raw_date!r}")

        amount = parse_amount(raw_amount)
        if amount is None:
            raise ValueError(f"invalid amount {raw_amount!r}")

        return cls(
            date=parsed_date,
            transaction_type=raw_type,
            category=category,
            amount=amount,
            note=note,
        )
