"""
Playlists app services layer.
"""

from .exceptions import (
    PlaylistsServiceError,
    PlaylistNotFoundError,
    SongNotFoundError,
    NotAttendeeError,
    InsufficientPermissionsError,
)

from .playlist_management import (
    create_playlist,
    get_party_playlists,
    add_song,
    get_playlist_songs,
    toggle_song_vote,
    mark_song_played,
    get_current_song,
)

__all__ = [
    # Exceptions
    'PlaylistsServiceError',
    'PlaylistNotFoundError',
    'SongNotFoundError',
    'NotAttendeeError',
    'InsufficientPermissionsError',
    # Services
    'create_playlist',
    'get_party_playlists',
    'add_song',
    'get_playlist_songs',
    'toggle_song_vote',
    'mark_song_played',
    'get_current_song',
]
