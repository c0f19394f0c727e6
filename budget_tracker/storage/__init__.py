"""Ledger file storage."""
from .record_store import RecordStore

__all__ = ['RecordStore']
