# ==========================================
# apps/games/admin.py
# ==========================================

from django.contrib import admin
from apps.games.models import Game, PartyGame


@admin.register(Game)
class GameAdmin(admin.ModelAdmin):
    """Admin interface for the game catalog."""

    list_display = ['name', 'category', 'popularity', 'is_public', 'creator', 'created_at']
    list_filter = ['category', 'is_public']
    search_fields = ['name', 'description']
    readonly_fields = ['popularity', 'created_at']


@admin.register(PartyGame)
class PartyGameAdmin(admin.ModelAdmin):
    list_display = ['game', 'party', 'added_by', 'is_active', 'added_at']
    list_filter = ['is_active']
    search_fields = ['game__name', 'party__title']
