"""
Error Types for Expense Tracker

DESIGN DECISION: Every failure the core can produce is a subclass of
ExpenseTrackerError. Core functions raise; only the CLI dispatcher catches,
prints the message and turns it into a non-zero exit status.

"File does not exist" is NOT an error here: the store creates itself.
"""


class ExpenseTrackerError(Exception):
    """Base exception for all expense tracker failures."""
    pass


class InvalidOptionsError(ExpenseTrackerError):
    """Option string was empty, malformed, or missing a required option."""

    def __init__(self, message: str = "Invalid options"):
        super().__init__(message)


class InvalidIdError(ExpenseTrackerError):
    """Expense ID was missing, zero, or did not match any record."""

    def __init__(self, message: str = "Invalid ID"):
        super().__init__(message)


class InvalidMonthError(ExpenseTrackerError):
    """Month number outside 1-12."""

    def __init__(self, message: str = "Invalid month number"):
        super().__init__(message)


class StorageError(ExpenseTrackerError):
    """Base exception for store I/O."""
    pass


class StoreUnreadableError(StorageError):
    """Store exists but could not be read or decoded."""
    pass


class StoreUnwritableError(StorageError):
    """Store could not be written."""
    pass
