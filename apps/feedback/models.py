# ==========================================
# apps/feedback/models.py
# ==========================================

from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
import uuid


class PartyFeedback(models.Model):
    """An attendee's rating of a party, submitted after it happened."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    party = models.ForeignKey('parties.Party', on_delete=models.CASCADE, related_name='feedback')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='party_feedback')
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    comment = models.TextField(blank=True)
    is_anonymous = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'party_feedback'
        unique_together = [['party', 'user']]
        ordering = ['-created_at']
        verbose_name_plural = 'party feedback'

    def __str__(self):
        return f"{self.party.title}: {self.rating}/5"
