"""
Domain-specific exceptions for playlists app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class PlaylistsServiceError(Exception):
    """Base exception for all playlists service errors."""
    pass


class PlaylistNotFoundError(PlaylistsServiceError):
    """Raised when a playlist does not exist."""
    pass


class SongNotFoundError(PlaylistsServiceError):
    """Raised when a song does not exist."""
    pass


class NotAttendeeError(PlaylistsServiceError):
    """Raised when a non-attendee edits a party's playlists."""
    pass


class InsufficientPermissionsError(PlaylistsServiceError):
    """Raised when someone other than the host or playlist creator controls playback."""
    pass
