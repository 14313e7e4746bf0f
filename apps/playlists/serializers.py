from rest_framework import serializers
from .models import Playlist, Song
from apps.accounts.serializers import UserPublicSerializer


class SongSerializer(serializers.ModelSerializer):
    """Serializer for queued songs."""

    added_by = UserPublicSerializer(read_only=True)

    class Meta:
        model = Song
        fields = [
            'id',
            'playlist',
            'title',
            'artist',
            'album_art',
            'duration',
            'spotify_id',
            'youtube_id',
            'added_by',
            'added_at',
            'votes',
            'played',
            'played_at',
        ]
        read_only_fields = ['id', 'playlist', 'added_by', 'added_at', 'votes', 'played', 'played_at']


class PlaylistSerializer(serializers.ModelSerializer):
    """Serializer for playlists."""

    creator = UserPublicSerializer(read_only=True)
    current_song = SongSerializer(read_only=True)

    class Meta:
        model = Playlist
        fields = [
            'id',
            'party',
            'name',
            'description',
            'creator',
            'is_active',
            'vote_required',
            'min_votes',
            'current_song',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'party', 'creator', 'is_active', 'current_song', 'created_at', 'updated_at']
