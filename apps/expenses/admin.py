# ==========================================
# apps/expenses/admin.py
# ==========================================

from django.contrib import admin
from apps.expenses.models import ExpensePool, PoolParticipant, Expense


class PoolParticipantInline(admin.TabularInline):
    """Inline admin for pool participants."""
    model = PoolParticipant
    extra = 0
    fields = ['user', 'joined_at']
    readonly_fields = ['joined_at']


@admin.register(ExpensePool)
class ExpensePoolAdmin(admin.ModelAdmin):
    """Admin interface for expense pools."""

    list_display = ['name', 'party', 'creator', 'total_amount', 'is_active', 'is_settled', 'created_at']
    list_filter = ['is_active', 'is_settled']
    search_fields = ['name', 'party__title', 'creator__email']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [PoolParticipantInline]


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    list_display = ['description', 'party', 'paid_by', 'amount', 'created_at']
    search_fields = ['description', 'party__title', 'paid_by__email']
    filter_horizontal = ['split_with', 'settled_by']
    date_hierarchy = 'created_at'
