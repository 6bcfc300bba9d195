"""
Audit Models for Expense Tracker

Every command that touches the store emits an audit event.
This provides:
1. Traceability of every add and delete
2. Debugging information when a command fails
3. A record of when the store was created

DESIGN DECISION: Audit events are only logged locally (structured logs on
stderr). They are never written into the expense store itself.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Persistence
    STORE_CREATED = "store_created"
    EXPENSE_ADDED = "expense_added"
    EXPENSE_DELETED = "expense_deleted"

    # Reporting
    REPORT_GENERATED = "report_generated"

    # Failures
    COMMAND_FAILED = "command_failed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    """

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Which expense, if any, this is about
    expense_id: Optional[int] = Field(
        default=None,
        description="ID of the expense this event relates to"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "expense_id": self.expense_id,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.expense_added(expense_id=1, amount=1000)
        audit_logger.log(event)
    """

    @staticmethod
    def store_created(path: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORE_CREATED,
            description="Expense store did not exist and was created empty",
            details={"path": path},
        )

    @staticmethod
    def expense_added(
        expense_id: int,
        amount: int,
        description: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_ADDED,
            expense_id=expense_id,
            description=f"Expense {expense_id} added",
            details={"amount": amount, "description": description},
        )

    @staticmethod
    def expense_deleted(expense_id: int, remaining: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_DELETED,
            expense_id=expense_id,
            description=f"Expense {expense_id} deleted",
            details={"remaining": remaining},
        )

    @staticmethod
    def report_generated(
        report: str,
        record_count: int,
        month: Optional[int] = None,
    ) -> AuditEvent:
        details: dict[str, Any] = {"report": report, "record_count": record_count}
        if month is not None:
            details["month"] = month
        return AuditEvent(
            event_type=AuditEventType.REPORT_GENERATED,
            severity=AuditSeverity.DEBUG,
            description=f"{report} report generated",
            details=details,
        )

    @staticmethod
    def command_failed(
        command: str,
        error_type: str,
        error_message: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.COMMAND_FAILED,
            severity=AuditSeverity.ERROR,
            description=f"Command '{command}' failed",
            details={"command": command, "error_type": error_type},
            error_message=error_message,
        )
