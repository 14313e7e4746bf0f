# ==========================================
# apps/safety/models.py
# ==========================================

from django.db import models
import uuid


class RideStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    ACCEPTED = 'accepted', 'Accepted'
    DECLINED = 'declined', 'Declined'
    COMPLETED = 'completed', 'Completed'
    CANCELLED = 'cancelled', 'Cancelled'


class DrinkType(models.TextChoices):
    BEER = 'beer', 'Beer'
    WINE = 'wine', 'Wine'
    LIQUOR = 'liquor', 'Liquor'
    OTHER = 'other', 'Other'


class DesignatedDriver(models.Model):
    """A party attendee who volunteers to drive others home."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    party = models.ForeignKey('parties.Party', on_delete=models.CASCADE, related_name='designated_drivers')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='driver_registrations')
    name = models.CharField(max_length=100)
    phone = models.CharField(max_length=30, blank=True)
    vehicle = models.CharField(max_length=100, blank=True)
    seats = models.PositiveSmallIntegerField(default=4)
    departure_time = models.DateTimeField(null=True, blank=True)
    destination = models.CharField(max_length=300, blank=True)
    active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'designated_drivers'
        unique_together = [['party', 'user']]
        indexes = [
            models.Index(fields=['party', 'active'], name='designated__party_i_5c7e21_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.name} driving for {self.party.title}"


class RideRequest(models.Model):
    """A request for a ride from a designated driver."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    driver = models.ForeignKey(DesignatedDriver, on_delete=models.CASCADE, related_name='ride_requests')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='ride_requests')
    pickup_location = models.CharField(max_length=300, blank=True)
    pickup_time = models.DateTimeField(null=True, blank=True)
    destination = models.CharField(max_length=300, blank=True)
    passengers = models.PositiveSmallIntegerField(default=1)
    status = models.CharField(max_length=20, choices=RideStatus.choices, default=RideStatus.PENDING)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'ride_requests'
        indexes = [
            models.Index(fields=['driver', 'status'], name='ride_reques_driver__0a4d93_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"Ride for {self.user.get_display_name()} ({self.status})"


class DrinkLog(models.Model):
    """Per-user, per-day drink counter."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='drink_logs')
    date = models.DateField()
    total_drinks = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = 'drink_logs'
        unique_together = [['user', 'date']]
        ordering = ['-date']

    def __str__(self):
        return f"{self.user.get_display_name()} on {self.date}: {self.total_drinks}"


class DrinkEntry(models.Model):
    """A single drink within a day's log."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    log = models.ForeignKey(DrinkLog, on_delete=models.CASCADE, related_name='entries')
    drink_type = models.CharField(max_length=20, choices=DrinkType.choices, default=DrinkType.OTHER)
    alcohol_content = models.DecimalField(max_digits=4, decimal_places=1, default=5)
    ounces = models.DecimalField(max_digits=5, decimal_places=1, default=12)
    consumed_at = models.DateTimeField()

    class Meta:
        db_table = 'drink_entries'
        ordering = ['consumed_at']
        verbose_name_plural = 'drink entries'

    def __str__(self):
        return f"{self.drink_type} at {self.consumed_at}"
