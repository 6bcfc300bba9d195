"""Expense reports package."""

from src.queries.reports import (
    ENGLISH_MONTH_NAMES,
    ExpenseReporter,
    format_expense_lines,
    get_english_month_name,
)

__all__ = [
    "ENGLISH_MONTH_NAMES",
    "ExpenseReporter",
    "format_expense_lines",
    "get_english_month_name",
]
