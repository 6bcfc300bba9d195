"""
Expense Reports

DESIGN DECISION: Reports are read-only and DETERMINISTIC.
They read the full store once and derive text from it; nothing here
ever writes.

Two reports exist:
- list: one aligned line per expense, in insertion order
- summary: total spent, optionally restricted to one calendar month
"""

from typing import Optional

from src.audit import AuditLogger
from src.errors import InvalidMonthError
from src.models.expense import Expense
from src.services.storage import ExpenseStorageInterface


ENGLISH_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def get_english_month_name(month: int) -> str:
    """
    Map 1-12 to the English month name.

    Raises:
        InvalidMonthError: For anything outside 1-12, including 0 and 13
    """
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise InvalidMonthError()
    return ENGLISH_MONTH_NAMES[month - 1]


def format_expense_lines(expenses: list[Expense]) -> list[str]:
    """
    Render expenses as aligned text columns.

    Columns: ID (right-aligned), date, description (left-aligned), amount.
    Widths come from the widest value in `expenses`.
    """
    if not expenses:
        return []

    id_width = max(len(str(expense.id)) for expense in expenses)
    description_width = max(len(expense.description) for expense in expenses)

    return [
        f"{expense.id:>{id_width}} {expense.date_label} "
        f"{expense.description:<{description_width}} ${expense.amount}"
        for expense in expenses
    ]


class ExpenseReporter:
    """
    Builds reports from stored expenses.

    GUARANTEES:
    - Only reports real data from storage
    - Store read errors propagate unchanged
    """

    def __init__(
        self,
        storage: ExpenseStorageInterface,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._storage = storage
        self._audit_logger = audit_logger

    def list_lines(self) -> list[str]:
        """One formatted line per expense, in insertion order."""
        expenses = self._storage.read()
        lines = format_expense_lines(expenses)
        if self._audit_logger:
            self._audit_logger.log_report_generated(
                report="list",
                record_count=len(expenses),
            )
        return lines

    def summary(self, month: Optional[int] = None) -> str:
        """
        Total of all amounts, or of one calendar month's amounts.

        The month is validated before the store is touched.
        """
        month_name = get_english_month_name(month) if month is not None else None

        expenses = self._storage.read()
        if month is not None:
            expenses = [expense for expense in expenses if expense.month == month]
        total = sum(expense.amount for expense in expenses)

        if self._audit_logger:
            self._audit_logger.log_report_generated(
                report="summary",
                record_count=len(expenses),
                month=month,
            )

        if month_name is None:
            return f"Total expenses: ${total}"
        return f"Total expenses for {month_name}: ${total}"
