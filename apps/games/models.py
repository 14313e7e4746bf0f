# ==========================================
# apps/games/models.py
# ==========================================

from django.db import models
import uuid


class GameCategory(models.TextChoices):
    DRINKING = 'drinking', 'Drinking'
    CARD = 'card', 'Card'
    PARTY = 'party', 'Party'
    OUTDOOR = 'outdoor', 'Outdoor'
    OTHER = 'other', 'Other'


class Game(models.Model):
    """A party game, optionally tied to the universities that play it."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    rules = models.TextField(blank=True)
    category = models.CharField(max_length=20, choices=GameCategory.choices, default=GameCategory.OTHER)
    universities = models.JSONField(default=list, blank=True)
    popularity = models.PositiveIntegerField(default=0, db_index=True)
    is_public = models.BooleanField(default=False)
    creator = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='created_games',
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'games'
        ordering = ['-popularity', 'name']

    def __str__(self):
        return self.name


class PartyGame(models.Model):
    """A game scheduled at a party."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    party = models.ForeignKey('parties.Party', on_delete=models.CASCADE, related_name='party_games')
    game = models.ForeignKey(Game, on_delete=models.CASCADE, related_name='party_games')
    added_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        related_name='added_party_games',
    )
    added_at = models.DateTimeField(auto_now_add=True)
    is_active = models.BooleanField(default=True)
    participants = models.ManyToManyField(
        'accounts.User',
        through='PartyGameParticipant',
        related_name='joined_party_games',
    )

    class Meta:
        db_table = 'party_games'
        ordering = ['-added_at']

    def __str__(self):
        return f"{self.game.name} at {self.party.title}"


class PartyGameParticipant(models.Model):
    """A player in a party game."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    party_game = models.ForeignKey(PartyGame, on_delete=models.CASCADE, related_name='memberships')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='party_game_memberships')
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'party_game_participants'
        unique_together = [['party_game', 'user']]
        ordering = ['joined_at']
