# ==========================================
# apps/parties/models.py
# ==========================================

from django.db import models
import uuid


class Party(models.Model):
    """A hosted campus party, scoped to the host's university."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    location = models.CharField(max_length=300)
    date_time = models.DateTimeField(db_index=True)
    max_attendees = models.PositiveIntegerField(null=True, blank=True)

    # Payment
    requires_payment = models.BooleanField(default=False)
    payment_amount = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True)
    venmo_username = models.CharField(max_length=100, blank=True)
    payment_description = models.CharField(max_length=200, blank=True)

    host = models.ForeignKey('accounts.User', on_delete=models.PROTECT, related_name='hosted_parties')
    university = models.CharField(max_length=200, db_index=True)
    attendees = models.ManyToManyField(
        'accounts.User',
        through='PartyAttendance',
        related_name='joined_parties',
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'parties'
        indexes = [
            models.Index(fields=['university', 'date_time'], name='parties_univers_3f0a1c_idx'),
            models.Index(fields=['host', 'date_time'], name='parties_host_id_8b2e47_idx'),
        ]
        ordering = ['date_time']
        verbose_name_plural = 'parties'

    def __str__(self):
        return self.title

    def has_attendee(self, user):
        if user is None or not getattr(user, 'is_authenticated', False):
            return False
        return self.attendances.filter(user=user).exists()

    def is_host(self, user):
        return user is not None and self.host_id == getattr(user, 'id', None)

    @property
    def attendee_count(self):
        return self.attendances.count()


class PartyAttendance(models.Model):
    """Membership edge between a user and a party."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    party = models.ForeignKey(Party, on_delete=models.CASCADE, related_name='attendances')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='party_attendances')
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'party_attendances'
        unique_together = [['party', 'user']]
        indexes = [
            models.Index(fields=['user', 'joined_at'], name='party_atten_user_id_1d9c52_idx'),
        ]
        ordering = ['joined_at']

    def __str__(self):
        return f"{self.user.get_display_name()} at {self.party.title}"


class PartyPayment(models.Model):
    """A user's self-reported payment for a paid party."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    party = models.ForeignKey(Party, on_delete=models.CASCADE, related_name='payments')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='party_payments')
    transaction_reference = models.CharField(max_length=200, blank=True)
    is_paid = models.BooleanField(default=False)
    paid_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'party_payments'
        unique_together = [['party', 'user']]

    def __str__(self):
        status = 'paid' if self.is_paid else 'unpaid'
        return f"{self.user.get_display_name()} - {self.party.title} ({status})"
