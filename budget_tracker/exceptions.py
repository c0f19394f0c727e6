"""Exceptions raised by the ledger."""


class LedgerError(Exception):
    """Base class for errors reported to the user as ``Error: <message>``."""
    pass


class StoreError(LedgerError):
    """The ledger file cannot be created, opened or written."""
    pass


class ParseError(LedgerError):
    """A stored line has a date or amount that cannot be parsed."""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"Invalid record on line {line_number}: {line!r} ({reason})")


class ValidationError(LedgerError):
    """User input for a command is invalid."""
    pass
