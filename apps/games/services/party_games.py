"""
Games scheduled at parties.
"""

from typing import List
from uuid import UUID

from django.db import transaction
from django.db.models import F

from apps.accounts.models import User
from apps.games.models import Game, PartyGame, PartyGameParticipant
from apps.parties.services import get_party_by_id, is_attendee

from .exceptions import (
    PartyGameNotFoundError,
    NotAttendeeError,
    NotPartyHostError,
)
from .game_catalog import get_game_by_id


def _get_party_game(party_game_id: UUID) -> PartyGame:
    try:
        return (
            PartyGame.objects
            .select_related('party', 'game')
            .get(id=party_game_id, is_active=True)
        )
    except PartyGame.DoesNotExist:
        raise PartyGameNotFoundError(f"Party game with ID {party_game_id} not found")


@transaction.atomic
def add_game_to_party(*, party_id: UUID, game_id: UUID, user: User) -> PartyGame:
    """
    Schedule a game at a party and bump its popularity.

    Raises:
        PartyNotFoundError: If party doesn't exist
        GameNotFoundError: If game doesn't exist
        NotAttendeeError: If user is not attending
    """
    party = get_party_by_id(party_id=party_id)
    game = get_game_by_id(game_id=game_id)

    if not is_attendee(party=party, user=user):
        raise NotAttendeeError("Only party attendees can add games")

    party_game = PartyGame.objects.create(party=party, game=game, added_by=user)
    Game.objects.filter(id=game.id).update(popularity=F('popularity') + 1)

    return party_game


def get_party_games(*, party_id: UUID) -> List[PartyGame]:
    """Active games at a party, newest first."""
    return list(
        PartyGame.objects
        .filter(party_id=party_id, is_active=True)
        .select_related('game')
        .prefetch_related('participants')
        .order_by('-added_at')
    )


@transaction.atomic
def join_party_game(*, party_game_id: UUID, user: User) -> PartyGame:
    """
    Join a party game. Joining twice is a no-op.

    Raises:
        PartyGameNotFoundError: If the party game doesn't exist or was removed
        NotAttendeeError: If user is not attending the party
    """
    party_game = _get_party_game(party_game_id)

    if not is_attendee(party=party_game.party, user=user):
        raise NotAttendeeError("Only party attendees can join games")

    PartyGameParticipant.objects.get_or_create(party_game=party_game, user=user)
    return party_game


@transaction.atomic
def remove_party_game(*, party_game_id: UUID, user: User) -> None:
    """
    Remove a game from a party (host only). The record is kept inactive.

    Raises:
        PartyGameNotFoundError: If the party game doesn't exist or was removed
        NotPartyHostError: If user is not the party host
    """
    party_game = _get_party_game(party_game_id)

    if party_game.party.host_id != user.id:
        raise NotPartyHostError("Only the host can remove games")

    party_game.is_active = False
    party_game.save(update_fields=['is_active'])
