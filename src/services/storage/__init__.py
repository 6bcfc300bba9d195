"""
Storage Services Package

Provides the abstract storage interface and the JSON file implementation.
"""

from src.services.storage.interface import (
    ExpenseStorageInterface,
    InMemoryExpenseStorage,
    StorageError,
    StoreUnreadableError,
    StoreUnwritableError,
)
from src.services.storage.json_file import JsonFileExpenseStorage

__all__ = [
    # Interfaces
    "ExpenseStorageInterface",
    "InMemoryExpenseStorage",
    # Exceptions
    "StorageError",
    "StoreUnreadableError",
    "StoreUnwritableError",
    # JSON file implementation
    "JsonFileExpenseStorage",
]
