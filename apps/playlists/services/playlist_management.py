"""
Playlist and song voting services.

Songs are ordered by votes (highest first), ties broken by who queued
first. ``Song.votes`` is kept equal to the number of SongVote rows.
"""

from typing import List, Optional, Tuple
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.parties.services import get_party_by_id, is_attendee
from apps.playlists.models import Playlist, Song, SongVote
from config.logging import get_logger

from .exceptions import (
    PlaylistNotFoundError,
    SongNotFoundError,
    NotAttendeeError,
    InsufficientPermissionsError,
)

logger = get_logger(__name__)

SONG_META_FIELDS = ('album_art', 'duration', 'spotify_id', 'youtube_id')


def _get_playlist(playlist_id: UUID) -> Playlist:
    try:
        return Playlist.objects.select_related('party').get(id=playlist_id)
    except Playlist.DoesNotExist:
        raise PlaylistNotFoundError(f"Playlist with ID {playlist_id} not found")


@transaction.atomic
def create_playlist(
    *,
    party_id: UUID,
    creator: User,
    name: str,
    description: str = "",
    vote_required: bool = False,
    min_votes: int = 1,
) -> Playlist:
    """
    Create a playlist for a party.

    Raises:
        PartyNotFoundError: If party doesn't exist
        NotAttendeeError: If creator is not attending
    """
    party = get_party_by_id(party_id=party_id)

    if not is_attendee(party=party, user=creator):
        raise NotAttendeeError("Only party attendees can create playlists")

    playlist = Playlist.objects.create(
        party=party,
        creator=creator,
        name=name,
        description=description,
        vote_required=vote_required,
        min_votes=min_votes,
    )

    logger.info("playlist_created", playlist_id=str(playlist.id), party_id=str(party.id))
    return playlist


def get_party_playlists(*, party_id: UUID) -> List[Playlist]:
    """Active playlists for a party, newest first."""
    return list(
        Playlist.objects
        .filter(party_id=party_id, is_active=True)
        .select_related('creator', 'current_song')
        .order_by('-created_at')
    )


@transaction.atomic
def add_song(*, playlist_id: UUID, user: User, title: str, artist: str, **meta) -> Song:
    """
    Queue a song. The person adding it casts its first vote.

    Args:
        playlist_id: UUID of the playlist
        user: Attendee adding the song
        title: Song title
        artist: Artist name
        **meta: Optional album_art, duration, spotify_id, youtube_id

    Returns:
        Created Song with ``votes=1``

    Raises:
        PlaylistNotFoundError: If playlist doesn't exist
        NotAttendeeError: If user is not attending the party
    """
    playlist = _get_playlist(playlist_id)

    if not is_attendee(party=playlist.party, user=user):
        raise NotAttendeeError("Only party attendees can add songs")

    details = {k: v for k, v in meta.items() if k in SONG_META_FIELDS and v is not None}
    song = Song.objects.create(
        playlist=playlist,
        title=title,
        artist=artist,
        added_by=user,
        votes=1,
        **details
    )
    SongVote.objects.create(song=song, user=user)

    return song


def get_playlist_songs(*, playlist_id: UUID, include_played: bool = False) -> List[Song]:
    """
    Songs on a playlist by votes descending, then earliest added.

    Raises:
        PlaylistNotFoundError: If playlist doesn't exist
    """
    _get_playlist(playlist_id)

    qs = Song.objects.filter(playlist_id=playlist_id).select_related('added_by')
    if not include_played:
        qs = qs.filter(played=False)
    return list(qs.order_by('-votes', 'added_at'))


@transaction.atomic
def toggle_song_vote(*, song_id: UUID, user: User) -> Tuple[Song, bool]:
    """
    Add the user's vote, or remove it if already cast.

    Returns:
        Tuple of (Song, voted) where ``voted`` is the new state

    Raises:
        SongNotFoundError: If song doesn't exist
        NotAttendeeError: If user is not attending the party
    """
    try:
        song = Song.objects.select_for_update().get(id=song_id)
    except Song.DoesNotExist:
        raise SongNotFoundError(f"Song with ID {song_id} not found")

    if not is_attendee(party=song.playlist.party, user=user):
        raise NotAttendeeError("Only party attendees can vote on songs")

    deleted, _ = SongVote.objects.filter(song=song, user=user).delete()
    voted = not deleted
    if voted:
        SongVote.objects.create(song=song, user=user)

    song.votes = song.song_votes.count()
    song.save(update_fields=['votes'])
    return song, voted


@transaction.atomic
def mark_song_played(*, song_id: UUID, user: User) -> Song:
    """
    Mark a song played and make it the playlist's current song.

    Raises:
        SongNotFoundError: If song doesn't exist
        InsufficientPermissionsError: If user is neither the party host
            nor the playlist creator
    """
    try:
        song = Song.objects.select_related('playlist__party').select_for_update().get(id=song_id)
    except Song.DoesNotExist:
        raise SongNotFoundError(f"Song with ID {song_id} not found")

    playlist = song.playlist
    if user.id not in (playlist.party.host_id, playlist.creator_id):
        raise InsufficientPermissionsError("Only the host or playlist creator can control playback")

    song.played = True
    song.played_at = timezone.now()
    song.save(update_fields=['played', 'played_at'])

    playlist.current_song = song
    playlist.save(update_fields=['current_song', 'updated_at'])

    return song


def get_current_song(*, playlist_id: UUID) -> Optional[Song]:
    """
    The song most recently marked played, or None.

    Raises:
        PlaylistNotFoundError: If playlist doesn't exist
    """
    try:
        playlist = Playlist.objects.select_related('current_song').get(id=playlist_id)
    except Playlist.DoesNotExist:
        raise PlaylistNotFoundError(f"Playlist with ID {playlist_id} not found")
    return playlist.current_song
