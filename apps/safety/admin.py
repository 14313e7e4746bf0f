# ==========================================
# apps/safety/admin.py
# ==========================================

from django.contrib import admin
from apps.safety.models import DesignatedDriver, RideRequest, DrinkLog, DrinkEntry


@admin.register(DesignatedDriver)
class DesignatedDriverAdmin(admin.ModelAdmin):
    """Admin interface for designated drivers."""

    list_display = ['name', 'party', 'user', 'seats', 'active', 'created_at']
    list_filter = ['active', 'created_at']
    search_fields = ['name', 'user__email', 'party__title']
    readonly_fields = ['created_at']


@admin.register(RideRequest)
class RideRequestAdmin(admin.ModelAdmin):
    list_display = ['user', 'driver', 'status', 'passengers', 'created_at']
    list_filter = ['status']
    search_fields = ['user__email', 'driver__name']


class DrinkEntryInline(admin.TabularInline):
    model = DrinkEntry
    extra = 0


@admin.register(DrinkLog)
class DrinkLogAdmin(admin.ModelAdmin):
    list_display = ['user', 'date', 'total_drinks']
    search_fields = ['user__email']
    date_hierarchy = 'date'
    inlines = [DrinkEntryInline]
