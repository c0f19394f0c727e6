"""Budget Tracker - record income and expenses in a flat ledger file."""

__version__ = "0.1.0"
