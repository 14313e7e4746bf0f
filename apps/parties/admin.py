# ==========================================
# apps/parties/admin.py
# ==========================================

from django.contrib import admin
from apps.parties.models import Party, PartyAttendance, PartyPayment


class PartyAttendanceInline(admin.TabularInline):
    """Inline admin for party attendees."""
    model = PartyAttendance
    extra = 0
    fields = ['user', 'joined_at']
    readonly_fields = ['joined_at']


@admin.register(Party)
class PartyAdmin(admin.ModelAdmin):
    """Admin interface for Parties."""

    list_display = [
        'title',
        'host',
        'university',
        'date_time',
        'attendee_count',
        'max_attendees',
        'requires_payment',
    ]
    list_filter = ['university', 'requires_payment', 'date_time']
    search_fields = ['title', 'location', 'host__email', 'university']
    readonly_fields = ['host', 'created_at', 'updated_at']
    inlines = [PartyAttendanceInline]
    date_hierarchy = 'date_time'
    ordering = ['-date_time']

    fieldsets = (
        ('Basic Information', {
            'fields': ('title', 'description', 'location', 'date_time', 'host', 'university')
        }),
        ('Capacity', {
            'fields': ('max_attendees',)
        }),
        ('Payment', {
            'fields': ('requires_payment', 'payment_amount', 'venmo_username', 'payment_description')
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def attendee_count(self, obj):
        """Show number of attendees."""
        return obj.attendances.count()
    attendee_count.short_description = 'Attendees'


@admin.register(PartyPayment)
class PartyPaymentAdmin(admin.ModelAdmin):
    """Admin interface for self-reported payments."""

    list_display = ['party', 'user', 'is_paid', 'transaction_reference', 'paid_at']
    list_filter = ['is_paid', 'paid_at']
    search_fields = ['party__title', 'user__email', 'transaction_reference']
    readonly_fields = ['created_at']
