# ==========================================
# apps/playlists/admin.py
# ==========================================

from django.contrib import admin
from apps.playlists.models import Playlist, Song


class SongInline(admin.TabularInline):
    """Inline admin for queued songs."""
    model = Song
    extra = 0
    fields = ['title', 'artist', 'votes', 'played']
    readonly_fields = ['votes']


@admin.register(Playlist)
class PlaylistAdmin(admin.ModelAdmin):
    """Admin interface for playlists."""

    list_display = ['name', 'party', 'creator', 'is_active', 'created_at']
    list_filter = ['is_active', 'vote_required']
    search_fields = ['name', 'party__title', 'creator__email']
    readonly_fields = ['current_song', 'created_at', 'updated_at']
    inlines = [SongInline]


@admin.register(Song)
class SongAdmin(admin.ModelAdmin):
    list_display = ['title', 'artist', 'playlist', 'votes', 'played']
    list_filter = ['played']
    search_fields = ['title', 'artist']
