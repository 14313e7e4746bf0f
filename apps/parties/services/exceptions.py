"""
Domain-specific exceptions for parties app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class PartiesServiceError(Exception):
    """Base exception for all parties service errors."""
    pass


class PartyNotFoundError(PartiesServiceError):
    """Raised when a party does not exist."""
    pass


class InvalidPartyError(PartiesServiceError):
    """Raised when party fields violate payment or capacity rules."""
    pass


class NotPartyHostError(PartiesServiceError):
    """Raised when a non-host attempts a host-only action."""
    pass


class PartyFullError(PartiesServiceError):
    """Raised when a party has reached max_attendees."""
    pass


class HostCannotLeaveError(PartiesServiceError):
    """Raised when the host tries to leave their own party."""
    pass


class PaymentNotRequiredError(PartiesServiceError):
    """Raised when submitting a payment for a free party."""
    pass


class InvalidPaymentReferenceError(PartiesServiceError):
    """Raised when a payment reference is blank."""
    pass
