"""
Services Package

Infrastructure the core depends on: persistence and time.
"""

from src.services.clock import Clock, FixedClock, SystemClock
from src.services.storage import (
    ExpenseStorageInterface,
    InMemoryExpenseStorage,
    JsonFileExpenseStorage,
    StorageError,
    StoreUnreadableError,
    StoreUnwritableError,
)

__all__ = [
    # Time
    "Clock",
    "FixedClock",
    "SystemClock",
    # Storage
    "ExpenseStorageInterface",
    "InMemoryExpenseStorage",
    "JsonFileExpenseStorage",
    "StorageError",
    "StoreUnreadableError",
    "StoreUnwritableError",
]
