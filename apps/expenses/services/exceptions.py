"""
Domain-specific exceptions for expenses app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class ExpensesServiceError(Exception):
    """Base exception for all expenses service errors."""
    pass


class ExpensePoolNotFoundError(ExpensesServiceError):
    """Raised when an expense pool does not exist."""
    pass


class ExpenseNotFoundError(ExpensesServiceError):
    """Raised when an expense does not exist."""
    pass


class NotAttendeeError(ExpensesServiceError):
    """Raised when a non-attendee takes part in a party's expenses."""
    pass


class CreatorCannotLeaveError(ExpensesServiceError):
    """Raised when a pool creator tries to leave their pool."""
    pass


class NotPoolCreatorError(ExpensesServiceError):
    """Raised when a non-creator tries to settle a pool."""
    pass


class InvalidExpenseError(ExpensesServiceError):
    """Raised when an expense amount is not positive."""
    pass


class InvalidSplitError(ExpensesServiceError):
    """Raised when a split cannot be computed or does not add up."""
    pass
