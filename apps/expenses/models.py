# ==========================================
# apps/expenses/models.py
# ==========================================

from django.db import models
import uuid


class ExpensePool(models.Model):
    """Shared kitty for a party's costs, split evenly among participants."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    party = models.ForeignKey('parties.Party', on_delete=models.CASCADE, related_name='expense_pools')
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    total_amount = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    creator = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='created_expense_pools')
    venmo_username = models.CharField(max_length=100, blank=True)
    is_active = models.BooleanField(default=True)
    is_settled = models.BooleanField(default=False)
    participants = models.ManyToManyField(
        'accounts.User',
        through='PoolParticipant',
        related_name='expense_pools',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'expense_pools'
        indexes = [
            models.Index(fields=['party', 'is_active'], name='expense_poo_party_i_6e1b0d_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ({self.party.title})"


class PoolParticipant(models.Model):
    """Membership in an expense pool; join order decides who absorbs split remainders."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    pool = models.ForeignKey(ExpensePool, on_delete=models.CASCADE, related_name='memberships')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='pool_memberships')
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'expense_pool_participants'
        unique_together = [['pool', 'user']]
        ordering = ['joined_at']

    def __str__(self):
        return f"{self.user.get_display_name()} in {self.pool.name}"


class Expense(models.Model):
    """A single cost paid by one attendee and shared with others."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    party = models.ForeignKey('parties.Party', on_delete=models.CASCADE, related_name='expenses')
    description = models.CharField(max_length=300, blank=True)
    amount = models.DecimalField(max_digits=10, decimal_places=2)
    paid_by = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='paid_expenses')
    split_with = models.ManyToManyField('accounts.User', related_name='shared_expenses', blank=True)
    settled_by = models.ManyToManyField('accounts.User', related_name='settled_expenses', blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'expenses'
        indexes = [
            models.Index(fields=['party', 'created_at'], name='expenses_party_i_2f8c6a_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.description or 'Expense'}: {self.amount}"
