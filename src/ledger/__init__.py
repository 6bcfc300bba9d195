"""Expense ledger package."""

from src.ledger.mutators import ExpenseLedger, next_expense_id

__all__ = ["ExpenseLedger", "next_expense_id"]
