"""
Data Models Package

This package contains the Pydantic models used in the Expense Tracker.
Everything persisted to the store conforms to Expense.
"""

from src.models.expense import (
    Expense,
    format_timestamp,
    parse_timestamp,
)
from src.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Expense model
    "Expense",
    "format_timestamp",
    "parse_timestamp",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
