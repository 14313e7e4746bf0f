# ==========================================
# apps/feedback/admin.py
# ==========================================

from django.contrib import admin
from apps.feedback.models import PartyFeedback


@admin.register(PartyFeedback)
class PartyFeedbackAdmin(admin.ModelAdmin):
    """Admin interface for party feedback."""

    list_display = ['party', 'user', 'rating', 'is_anonymous', 'created_at']
    list_filter = ['rating', 'is_anonymous', 'created_at']
    search_fields = ['party__title', 'user__email', 'comment']
    readonly_fields = ['created_at']
