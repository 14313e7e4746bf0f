# ==========================================
# apps/playlists/models.py
# ==========================================

from django.db import models
import uuid


class Playlist(models.Model):
    """Collaborative song queue for a party."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    party = models.ForeignKey('parties.Party', on_delete=models.CASCADE, related_name='playlists')
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    creator = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='created_playlists')
    is_active = models.BooleanField(default=True)
    vote_required = models.BooleanField(default=False)
    min_votes = models.PositiveIntegerField(default=1)
    current_song = models.ForeignKey(
        'Song',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'playlists'
        ordering = ['-created_at']

    def __str__(self):
        return self.name


class Song(models.Model):
    """A song queued on a playlist."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    playlist = models.ForeignKey(Playlist, on_delete=models.CASCADE, related_name='songs')
    title = models.CharField(max_length=300)
    artist = models.CharField(max_length=300)
    album_art = models.URLField(blank=True)
    duration = models.PositiveIntegerField(default=0, help_text='Seconds')
    spotify_id = models.CharField(max_length=100, blank=True)
    youtube_id = models.CharField(max_length=100, blank=True)
    added_by = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='added_songs')
    added_at = models.DateTimeField(auto_now_add=True)
    votes = models.PositiveIntegerField(default=0)
    played = models.BooleanField(default=False)
    played_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'songs'
        indexes = [
            models.Index(fields=['playlist', 'played', '-votes'], name='songs_playlis_4a7d2e_idx'),
        ]
        ordering = ['-votes', 'added_at']

    def __str__(self):
        return f"{self.title} - {self.artist}"


class SongVote(models.Model):
    """One user's vote for a song."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    song = models.ForeignKey(Song, on_delete=models.CASCADE, related_name='song_votes')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='song_votes')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'song_votes'
        unique_together = [['song', 'user']]
