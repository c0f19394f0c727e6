"""Data models for the ledger."""
from .transaction import Transaction, TransactionType
from .totals import Totals

__all__ = ['Transaction', 'TransactionType', 'Totals']
