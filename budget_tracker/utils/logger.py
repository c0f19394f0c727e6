"""Logging configuration for the application."""
import logging
import sys
from pathlib import Path
from datetime import datetime

from ..config.settings import LOG_LEVEL, LOG_FILE


def setup_logger(name: str = "budget_tracker") -> logging.Logger:
    """
    Set up logger with console and optional file handlers.

    Console output goes to stderr so that stdout carries only command output.

    Args:
        name: Logger name

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    level = getattr(logging, LOG_LEVEL.upper(), logging.WARNING)
    logger.setLevel(logging.DEBUG if LOG_FILE else level)

    # Create formatters
    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    simple_formatter = logging.Formatter(
        '%(levelname)s: %(message)s'
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(simple_formatter)
    logger.addHandler(console_handler)

    # File handler (DEBUG and above), only when a log file is configured
    if LOG_FILE:
        try:
            LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(LOG_FILE, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(detailed_formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not set up file logging: {e}")

    return logger


def log_store_audit(
    file_path: Path,
    action: str,
    transaction_type: str,
    amount: str,
    category: str
) -> None:
    """
    Log a ledger write as a structured audit line.

    Args:
        file_path: Path to the ledger file
        action: What happened to the ledger (e.g. "append")
        transaction_type: income or expense
        amount: Amount as written to the file
        category: Category label
    """
    logger = logging.getLogger("budget_tracker.audit")

    audit_data = {
        "timestamp": datetime.now().isoformat(),
        "file": file_path.name,
        "action": action,
        "type": transaction_type,
        "amount": amount,
        "category": category,
    }

    audit_message = " | ".join(f"{k}={v}" for k, v in audit_data.items())
    logger.info(f"AUDIT: {audit_message}")
