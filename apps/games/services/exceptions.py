"""
Domain-specific exceptions for games app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class GamesServiceError(Exception):
    """Base exception for all games service errors."""
    pass


class GameNotFoundError(GamesServiceError):
    """Raised when a game does not exist."""
    pass


class PartyGameNotFoundError(GamesServiceError):
    """Raised when a party game does not exist or was removed."""
    pass


class NotAttendeeError(GamesServiceError):
    """Raised when a non-attendee adds or joins a party game."""
    pass


class NotPartyHostError(GamesServiceError):
    """Raised when a non-host removes a party game."""
    pass
