"""
Append-only ledger file.

The file is plain UTF-8 text. Line 1 is always the header
``date,type,category,amount,note``; every other line is one transaction.
Records are only ever appended, never rewritten.
"""
import logging
from pathlib import Path
from typing import List, Optional

from ..config.settings import STORE_ENCODING, STORE_FILE, STORE_HEADER
from ..exceptions import ParseError, StoreError
from ..models.transaction import DELIMITER, FIELD_COUNT, Transaction
from ..utils.amount_parser import format_amount
from ..utils.logger import log_store_audit

logger = logging.getLogger(__name__)


class RecordStore:
    """Reads and appends transactions in a delimited text file."""

    HEADER = STORE_HEADER

    def __init__(self, path: Optional[Path] = None):
        """
        Initialize the store.

        Args:
            path: Ledger file path (defaults to ``STORE_FILE``)
        """
        self.path = Path(path) if path is not None else STORE_FILE

    def ensure_initialized(self) -> None:
        """
        Write the header line if the ledger file is missing or empty.

        Raises:
            StoreError: If the file cannot be created
        """
        try:
            if self.path.exists() and self.path.stat().st_size > 0:
                return
            with open(self.path, "a", encoding=STORE_ENCODING, newline="") as f:
                f.write(self.HEADER + "\n")
        except OSError as e:
            raise StoreError(f"Could not create file: {e}") from e

        logger.debug(f"Created ledger file {self.path}")

    def append(self, transaction: Transaction) -> None:
        """
        Append one transaction as a single line.

        Args:
            transaction: Transaction to persist

        Raises:
            StoreError: If the file cannot be written
        """
        line = transaction.to_csv() + "\n"

        try:
            if self._missing_final_newline():
                line = "\n" + line
            with open(self.path, "a", encoding=STORE_ENCODING, newline="") as f:
                f.write(line)
        except OSError as e:
            raise StoreError(f"Could not write to {self.path}: {e}") from e

        log_store_audit(
            self.path,
            "append",
            transaction.transaction_type,
            format_amount(transaction.amount),
            transaction.category,
        )

    def load_all(self) -> List[Transaction]:
        """
        Load every transaction in file order.

        Lines with fewer than five fields are skipped. A read failure is
        logged and yields an empty list.

        Returns:
            List of transactions

        Raises:
            ParseError: If a line has an unparseable date or amount
        """
        try:
            # Universal newlines: \r and \r\n arrive as \n, nothing else splits a line
            with open(self.path, "r", encoding=STORE_ENCODING) as f:
                lines = f.read().split("\n")
        except OSError as e:
            logger.error(f"Read error: {e}")
            return []

        transactions = []
        # Line 1 is the header
        for line_number, line in enumerate(lines[1:], start=2):
            fields = line.split(DELIMITER, FIELD_COUNT - 1)
            if len(fields) < FIELD_COUNT:
                logger.debug(f"Skipping short line {line_number}: {line!r}")
                continue

            try:
                transactions.append(Transaction.from_fields(fields))
            except ValueError as e:
                raise ParseError(line_number, line, str(e)) from e

        return transactions

    def _missing_final_newline(self) -> bool:
        """True if the file is non-empty and its last byte is not a newline."""
        if not self.path.exists() or self.path.stat().st_size == 0:
            return False
        with open(self.path, "rb") as f:
            f.seek(-1, 2)
            return f.read(1) not in (b"\n", b"\r")
