"""Pytest configuration and fixtures."""
import pytest
from datetime import date
from decimal import Decimal

from budget_tracker.models import Transaction
from budget_tracker.storage import RecordStore


@pytest.fixture
def sample_transaction():
    """Create a sample expense for testing."""
    return Transaction(
        date=date(2025, 9, 5),
        transaction_type="expense",
        category="Groceries",
        amount=Decimal("85.30"),
        note=""
    )


@pytest.fixture
def sample_transactions():
    """Create transactions spread over two months."""
    return [
        Transaction(
            date=date(2025, 8, 28),
            transaction_type="income",
            category="Salary",
            amount=Decimal("2500.00"),
            note="Paycheck"
        ),
        Transaction(
            date=date(2025, 8, 30),
            transaction_type="expense",
            category="Rent",
            amount=Decimal("1200.00"),
            note="August"
        ),
        Transaction(
            date=date(2025, 9, 5),
            transaction_type="expense",
            category="Groceries",
            amount=Decimal("85.30"),
            note=""
        ),
        Transaction(
            date=date(2025, 9, 12),
            transaction_type="income",
            category="Freelance",
            amount=Decimal("300.50"),
            note="Logo design"
        ),
    ]


@pytest.fixture
def ledger_path(tmp_path):
    """Path to a ledger file that does not exist yet."""
    return tmp_path / "transactions.csv"


@pytest.fixture
def store(ledger_path):
    """Record store backed by a temporary file."""
    return RecordStore(ledger_path)


@pytest.fixture
def populated_store(store, sample_transactions):
    """Record store already holding the sample transactions."""
    store.ensure_initialized()
    for txn in sample_transactions:
        store.append(txn)
    return store
