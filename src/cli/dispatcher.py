"""
Command-line Entry Point for Expense Tracker

This is the only place errors are caught. Every command:
1. Parses its options
2. Runs one ledger or report operation
3. Prints the result lines to stdout

Any failure prints its message to stderr and exits with status 1.
Usage requests and unknown commands print the usage text and exit 0.
"""

import re
import sys
from typing import Callable, Optional, Sequence, TextIO

from src.audit import AuditLogger, configure_logging
from src.cli.options import parse_options
from src.config import TrackerSettings, get_settings
from src.errors import (
    ExpenseTrackerError,
    InvalidIdError,
    InvalidMonthError,
    InvalidOptionsError,
)
from src.ledger import ExpenseLedger
from src.queries import ExpenseReporter
from src.services.clock import Clock
from src.services.storage import JsonFileExpenseStorage


USAGE = """\
Usage: expense-tracker <command> [options]

Commands:
  add --amount <int> --description <text>   Record a new expense
  delete --id <int>                         Delete an expense by ID
  list                                      List all expenses
  summary [--month <1-12>]                  Show total expenses, optionally for one month

Options:
  -h, --help                                Show this message

The store location is read from EXPENSE_TRACKER_STORE_PATH (default: expenses.json).
"""


def show_usage(stream: Optional[TextIO] = None) -> None:
    """Print the usage text."""
    print(USAGE, end="", file=stream or sys.stdout)


def show_results(results: Sequence[str], stream: Optional[TextIO] = None) -> None:
    """Print each result on its own line."""
    for result in results:
        print(result, file=stream or sys.stdout)


_INTEGER = re.compile(r"-?\d+", re.ASCII)


def _parse_int(value: str, error: type[ExpenseTrackerError]) -> int:
    """Parse a plain ASCII decimal integer, raising `error` for anything else."""
    if not _INTEGER.fullmatch(value):
        raise error()
    return int(value)


# =============================================================================
# COMMAND HANDLERS
# =============================================================================

def _run_add(option_string: str, ledger: ExpenseLedger, reporter: ExpenseReporter) -> list[str]:
    options = parse_options(option_string)
    # Both options are required; fail before anything touches the store.
    if not options.get("amount") or not options.get("description"):
        raise InvalidOptionsError()
    amount = _parse_int(options["amount"], InvalidOptionsError)
    return [ledger.add(amount, options["description"])]


def _run_delete(option_string: str, ledger: ExpenseLedger, reporter: ExpenseReporter) -> list[str]:
    options = parse_options(option_string)
    if not options.get("id"):
        raise InvalidOptionsError()
    return [ledger.delete(_parse_int(options["id"], InvalidIdError))]


def _run_list(option_string: str, ledger: ExpenseLedger, reporter: ExpenseReporter) -> list[str]:
    return reporter.list_lines()


def _run_summary(option_string: str, ledger: ExpenseLedger, reporter: ExpenseReporter) -> list[str]:
    month = None
    if option_string.strip():
        options = parse_options(option_string)
        if "month" in options:
            month = _parse_int(options["month"], InvalidMonthError)
    return [reporter.summary(month)]


CommandHandler = Callable[[str, ExpenseLedger, ExpenseReporter], list[str]]

COMMANDS: dict[str, CommandHandler] = {
    "add": _run_add,
    "delete": _run_delete,
    "list": _run_list,
    "summary": _run_summary,
}


def main(
    argv: Optional[Sequence[str]] = None,
    settings: Optional[TrackerSettings] = None,
    clock: Optional[Clock] = None,
) -> int:
    """
    Run one command and return the process exit status.

    Args:
        argv: Arguments after the program name (None = sys.argv[1:])
        settings: Settings to use instead of the environment
        clock: Time source for new expenses (None = system clock)
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] in ("-h", "--help"):
        show_usage()
        return 0

    command = args[0]
    handler = COMMANDS.get(command)
    if handler is None:
        show_usage()
        return 0

    option_string = " ".join(args[1:])
    audit_logger = AuditLogger()
    # Defaults until settings load, so early failures still log to stderr.
    configure_logging()

    try:
        settings = settings or get_settings()
        configure_logging(settings.log_level, settings.log_format)

        storage = JsonFileExpenseStorage(
            settings.resolved_store_path,
            indent=settings.json_indent,
            audit_logger=audit_logger,
        )
        ledger = ExpenseLedger(storage, clock=clock, audit_logger=audit_logger)
        reporter = ExpenseReporter(storage, audit_logger=audit_logger)

        results = handler(option_string, ledger, reporter)
    except Exception as e:
        audit_logger.log_command_failed(command, e)
        print(str(e) or "Unknown error occurred.", file=sys.stderr)
        return 1

    show_results(results)
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
