"""
Domain-specific exceptions for safety app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class SafetyServiceError(Exception):
    """Base exception for all safety service errors."""
    pass


class NotAttendeeError(SafetyServiceError):
    """Raised when a non-attendee tries to volunteer as a driver."""
    pass


class NotRegisteredAsDriverError(SafetyServiceError):
    """Raised when unregistering a user who is not an active driver."""
    pass


class DriverUnavailableError(SafetyServiceError):
    """Raised when a ride is requested from a missing or inactive driver."""
    pass


class DuplicateRideRequestError(SafetyServiceError):
    """Raised when the user already has an open request with this driver."""
    pass


class InvalidBACInputError(SafetyServiceError):
    """Raised when BAC inputs are out of range."""
    pass
