"""Shared fixtures: a temp-dir store and a frozen clock."""

from datetime import datetime, timezone

import pytest

from src.config import TrackerSettings, get_settings
from src.models.expense import Expense
from src.services.clock import FixedClock
from src.services.storage import InMemoryExpenseStorage, JsonFileExpenseStorage


START_TIME = "2024-01-02T11:01:58.135Z"


@pytest.fixture
def fixed_time() -> datetime:
    return datetime(2024, 1, 2, 11, 1, 58, 135000, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock(fixed_time) -> FixedClock:
    return FixedClock(fixed_time)


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "expenses.json"


@pytest.fixture
def json_storage(store_path) -> JsonFileExpenseStorage:
    return JsonFileExpenseStorage(store_path)


@pytest.fixture
def settings(store_path) -> TrackerSettings:
    return TrackerSettings(store_path=store_path)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_expense():
    """Factory for expenses with sensible defaults."""
    def _make(
        expense_id: int,
        amount: int = 100,
        description: str = "expense",
        date: str = START_TIME,
    ) -> Expense:
        return Expense(id=expense_id, amount=amount, description=description, date=date)
    return _make


@pytest.fixture
def memory_storage():
    """Factory for in-memory stores pre-filled with expenses."""
    def _make(*expenses: Expense) -> InMemoryExpenseStorage:
        return InMemoryExpenseStorage(expenses)
    return _make
