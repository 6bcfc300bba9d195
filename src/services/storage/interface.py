"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Keep the ledger and reports decoupled from the file format
2. Use in-memory storage for testing
3. Point every command at an explicit store location

The interface is intentionally tiny. The whole store is read and written
as one unit; there are no per-record operations.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from src.errors import (
    StorageError,
    StoreUnreadableError,
    StoreUnwritableError,
)
from src.models.expense import Expense


class ExpenseStorageInterface(ABC):
    """
    Abstract interface for expense storage.

    Implementations persist the full, ordered sequence of expenses.
    """

    @abstractmethod
    def read(self) -> list[Expense]:
        """
        Load every expense, in insertion order.

        A missing store is created empty and yields an empty list.

        Raises:
            StoreUnreadableError: If the store exists but cannot be read
        """
        pass

    @abstractmethod
    def write(self, expenses: Sequence[Expense]) -> None:
        """
        Replace the stored sequence with `expenses`.

        Raises:
            StoreUnwritableError: If the store cannot be written
        """
        pass


class InMemoryExpenseStorage(ExpenseStorageInterface):
    """Storage kept in a Python list. Used in tests and dry runs."""

    def __init__(self, expenses: Sequence[Expense] = ()):
        self._expenses = list(expenses)
        self.write_count = 0

    def read(self) -> list[Expense]:
        return list(self._expenses)

    def write(self, expenses: Sequence[Expense]) -> None:
        self._expenses = list(expenses)
        self.write_count += 1


__all__ = [
    "ExpenseStorageInterface",
    "InMemoryExpenseStorage",
    "StorageError",
    "StoreUnreadableError",
    "StoreUnwritableError",
]
