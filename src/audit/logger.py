"""
Audit Logger

DESIGN DECISION: Every significant action in the system is logged.
This provides:
1. Traceability of every change to the store
2. Debugging capability when a command fails

The audit logger:
- Writes structured logs to stderr so stdout carries only command output
- Gracefully handles failures (never crashes a command because logging failed)
"""

import logging
import sys
from typing import Optional

import structlog

from src.models.audit import AuditEvent, AuditEventBuilder


def configure_logging(level: str = "WARNING", log_format: str = "console") -> None:
    """
    Configure stdlib logging and structlog for the CLI.

    Safe to call more than once; the last call wins.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


class AuditLogger:
    """
    Central audit logging service.

    Every event is logged at the level matching its severity.
    """

    def __init__(self, logger: Optional[structlog.stdlib.BoundLogger] = None):
        self._logger = logger or structlog.get_logger("expense_tracker.audit")

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Returns False if the logging backend itself failed.
        """
        log_dict = event.to_log_dict()
        try:
            if event.severity.value == "error":
                self._logger.error("audit_event", **log_dict)
            elif event.severity.value == "warning":
                self._logger.warning("audit_event", **log_dict)
            elif event.severity.value == "debug":
                self._logger.debug("audit_event", **log_dict)
            else:
                self._logger.info("audit_event", **log_dict)
        except Exception:
            return False
        return True

    def log_store_created(self, path: str) -> None:
        """Log creation of an empty store."""
        self.log(AuditEventBuilder.store_created(path=path))

    def log_expense_added(
        self,
        expense_id: int,
        amount: int,
        description: str,
    ) -> None:
        """Log an added expense."""
        self.log(AuditEventBuilder.expense_added(
            expense_id=expense_id,
            amount=amount,
            description=description,
        ))

    def log_expense_deleted(self, expense_id: int, remaining: int) -> None:
        """Log a deleted expense."""
        self.log(AuditEventBuilder.expense_deleted(
            expense_id=expense_id,
            remaining=remaining,
        ))

    def log_report_generated(
        self,
        report: str,
        record_count: int,
        month: Optional[int] = None,
    ) -> None:
        self.log(AuditEventBuilder.report_generated(
            report=report,
            record_count=record_count,
            month=month,
        ))

    def log_command_failed(
        self,
        command: str,
        error: Exception,
    ) -> None:
        """Log a command that ended in an error."""
        self.log(AuditEventBuilder.command_failed(
            command=command,
            error_type=type(error).__name__,
            error_message=str(error),
        ))
