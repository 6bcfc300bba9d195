"""
Expense Ledger

The only code that changes the store. Each operation is one complete
read-mutate-write cycle: the full sequence is loaded, changed in memory
and written back in full.

IDs are assigned as max(existing) + 1, so an ID freed by a delete is
only handed out again if it was the highest one.
"""

from typing import Optional

from pydantic import ValidationError

from src.audit import AuditLogger
from src.errors import InvalidIdError, InvalidOptionsError
from src.models.expense import Expense, format_timestamp
from src.services.clock import Clock, SystemClock
from src.services.storage import ExpenseStorageInterface


def next_expense_id(expenses: list[Expense]) -> int:
    """Next free ID: one past the highest existing ID, starting at 1."""
    return max((expense.id for expense in expenses), default=0) + 1


class ExpenseLedger:
    """
    Adds and deletes expenses.

    GUARANTEES:
    - Insertion order is preserved
    - A failed operation leaves the store untouched
    """

    def __init__(
        self,
        storage: ExpenseStorageInterface,
        clock: Optional[Clock] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._storage = storage
        self._clock = clock or SystemClock()
        self._audit_logger = audit_logger

    def add(self, amount: int, description: str) -> str:
        """
        Record a new expense stamped with the clock's current time.

        Returns:
            Confirmation message containing the new ID

        Raises:
            InvalidOptionsError: If the description is empty
        """
        expenses = self._storage.read()
        expense_id = next_expense_id(expenses)

        try:
            expense = Expense(
                id=expense_id,
                amount=amount,
                description=description,
                date=format_timestamp(self._clock.now()),
            )
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors())
            raise InvalidOptionsError(f"Invalid options: {fields}") from e

        expenses.append(expense)
        self._storage.write(expenses)

        if self._audit_logger:
            self._audit_logger.log_expense_added(
                expense_id=expense.id,
                amount=expense.amount,
                description=expense.description,
            )

        return f"Expense added successfully (ID: {expense.id})"

    def delete(self, expense_id: Optional[int]) -> str:
        """
        Permanently remove the expense with `expense_id`.

        Raises:
            InvalidIdError: If the ID is missing/zero or matches nothing
        """
        if not expense_id:
            raise InvalidIdError()

        expenses = self._storage.read()
        remaining = [expense for expense in expenses if expense.id != expense_id]
        if len(remaining) == len(expenses):
            raise InvalidIdError()

        self._storage.write(remaining)

        if self._audit_logger:
            self._audit_logger.log_expense_deleted(
                expense_id=expense_id,
                remaining=len(remaining),
            )

        return "Expense deleted successfully"
