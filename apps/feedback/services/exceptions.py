"""
Domain-specific exceptions for feedback app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class FeedbackServiceError(Exception):
    """Base exception for all feedback service errors."""
    pass


class NotAttendeeError(FeedbackServiceError):
    """Raised when a non-attendee tries to rate a party."""
    pass


class PartyNotOverError(FeedbackServiceError):
    """Raised when feedback is submitted before the party has happened."""
    pass


class DuplicateFeedbackError(FeedbackServiceError):
    """Raised when a user rates the same party twice."""
    pass


class InvalidRatingError(FeedbackServiceError):
    """Raised when a rating is outside 1-5."""
    pass
