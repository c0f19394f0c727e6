"""Command-line interface for the budget tracker."""
import click
import sys
from datetime import date
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from . import __version__
from .analytics import filter_by_month, monthly_balance, summarize
from .config.settings import STORE_FILE
from .exceptions import LedgerError, ValidationError
from .models import Transaction, TransactionType
from .storage import RecordStore
from .utils.amount_parser import format_amount, parse_amount
from .utils.date_parser import format_date
from .utils.logger import setup_logger

console = Console(highlight=False, soft_wrap=True, emoji=False)
err_console = Console(stderr=True, highlight=False, soft_wrap=True, emoji=False)
logger = setup_logger()

HELP_TEXT = """\
Commands:
  add <type> <category> <amount> [note]
  list [YYYY-MM]
  summary [YYYY-MM]
  balance
Example:
  budget add expense Food 12.50 "Lunch"
  budget list 2025-09"""

ADD_USAGE = "Usage: add <type> <category> <amount> [note]"

ROW_FORMAT = "%-10s %-7s %-12s %-10s %s"
SEPARATOR = "-" * 63

# Surplus positional arguments are ignored rather than rejected
IGNORE_EXTRA_ARGS = {"ignore_unknown_options": True, "allow_extra_args": True}


class LedgerGroup(click.Group):
    """
    Command group with the ledger's dispatch rules.

    Command names are case-insensitive, unknown commands fall back to
    ``help``, and ledger errors are rendered once as ``Error: <message>``.
    """

    def get_command(self, ctx, cmd_name):
        command = super().get_command(ctx, cmd_name.lower())
        if command is None:
            command = super().get_command(ctx, "help")
        return command

    def format_help(self, ctx, formatter):
        formatter.write(HELP_TEXT + "\n")

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except LedgerError as e:
            err_console.print(f"[red]Error: {escape(str(e))}[/red]")
            logger.debug("Command failed", exc_info=True)
            ctx.exit(1)


@click.group(cls=LedgerGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="budget")
@click.pass_context
def cli(ctx):
    """Budget Tracker - record income and expenses in a ledger file."""
    if ctx.invoked_subcommand is None:
        click.echo(HELP_TEXT)
        return

    # The store object touches nothing on disk until a handler uses it
    if ctx.obj is None:
        ctx.obj = RecordStore(STORE_FILE)


def build_transaction(
    transaction_type: str,
    category: str,
    amount: str,
    note: str = "",
    today: Optional[date] = None
) -> Transaction:
    """
    Validate ``add`` arguments and build a transaction.

    Raises:
        ValidationError: If the type is not income/expense or the amount
            is not a number
    """
    kind = TransactionType.parse(transaction_type)

    parsed_amount = parse_amount(amount)
    if parsed_amount is None:
        raise ValidationError(f"Amount must be a number: {amount}")

    return Transaction(
        date=today or date.today(),
        transaction_type=kind.value,
        category=category,
        amount=parsed_amount,
        note=note or "",
    )


def format_table(transactions: List[Transaction]) -> List[str]:
    """Render transactions as fixed-width rows, header and separator first."""
    rows = [
        ROW_FORMAT % ("Date", "Type", "Category", "Amount", "Note"),
        SEPARATOR,
    ]
    for txn in transactions:
        amount = format_amount(txn.amount)
        if txn.is_expense:
            amount = "-" + amount
        rows.append(ROW_FORMAT % (
            format_date(txn.date), txn.transaction_type, txn.category, amount, txn.note
        ))
    return rows


@cli.command(context_settings=IGNORE_EXTRA_ARGS)
@click.argument('transaction_type', required=False)
@click.argument('category', required=False)
@click.argument('amount', required=False)
@click.argument('note', required=False, default="")
@click.pass_obj
def add(store, transaction_type, category, amount, note):
    """Record an income or expense dated today."""
    store.ensure_initialized()

    if amount is None:
        console.print(escape(ADD_USAGE))
        return

    try:
        transaction = build_transaction(transaction_type, category, amount, note)
    except ValidationError as e:
        console.print(f"[yellow]{escape(str(e))}[/yellow]")
        logger.debug(f"Rejected add: {e}")
        return

    store.append(transaction)
    console.print(
        f"[green]Saved[/green] {transaction.transaction_type} of "
        f"{format_amount(transaction.amount)} in category {escape(transaction.category)}"
    )


@cli.command("list", context_settings=IGNORE_EXTRA_ARGS)
@click.argument('month', required=False)
@click.pass_obj
def list_command(store, month):
    """List transactions, optionally for one YYYY-MM month."""
    store.ensure_initialized()

    transactions = filter_by_month(store.load_all(), month)
    for row in format_table(transactions):
        click.echo(row)
    click.echo(f"{len(transactions)} transactions shown")


@cli.command(context_settings=IGNORE_EXTRA_ARGS)
@click.argument('month', required=False)
@click.pass_obj
def summary(store, month):
    """Show income, expense and net, optionally for one YYYY-MM month."""
    store.ensure_initialized()

    totals = summarize(filter_by_month(store.load_all(), month))
    click.echo(f"Summary for {month if month is not None else 'all months'}")
    click.echo(f"  Income : {format_amount(totals.income)}")
    click.echo(f"  Expense: {format_amount(totals.expense)}")
    click.echo(f"  Net    : {format_amount(totals.net)}")


@cli.command(context_settings=IGNORE_EXTRA_ARGS)
@click.pass_obj
def balance(store):
    """Show income, expense and net for every month."""
    store.ensure_initialized()

    for month, totals in monthly_balance(store.load_all()).items():
        click.echo(
            f"{month}: income={format_amount(totals.income)}  "
            f"expense={format_amount(totals.expense)}  "
            f"net={format_amount(totals.net)}"
        )


@cli.command('help', context_settings={"ignore_unknown_options": True})
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
def help_command(args):
    """Show usage."""
    click.echo(HELP_TEXT)


def main():
    """Main entry point."""
    try:
        cli(prog_name="budget")
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        logger.debug("Unhandled exception", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
