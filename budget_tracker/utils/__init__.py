"""Utility functions."""
from .logger import setup_logger, log_store_audit
from .amount_parser import parse_amount, format_amount, quantize_amount
from .date_parser import parse_date, format_date, month_key

__all__ = [
    'setup_logger',
    'log_store_audit',
    'parse_amount',
    'format_amount',
    'quantize_amount',
    'parse_date',
    'format_date',
    'month_key',
]
