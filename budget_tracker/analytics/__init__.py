"""Ledger analytics."""
from .ledger_analyzer import filter_by_month, summarize, monthly_balance

__all__ = ['filter_by_month', 'summarize', 'monthly_balance']
