"""
Membership management service.

Join and leave run inside a transaction with the party row locked, so
concurrent joins near capacity are serialized.
"""

from typing import List
from uuid import UUID

from django.db import transaction, IntegrityError

from apps.accounts.models import User
from apps.parties.models import Party, PartyAttendance
from config.logging import get_logger

from .exceptions import (
    PartyNotFoundError,
    PartyFullError,
    HostCannotLeaveError,
)

logger = get_logger(__name__)


def _lock_party(party_id: UUID) -> Party:
    try:
        return Party.objects.select_for_update().get(id=party_id)
    except Party.DoesNotExist:
        raise PartyNotFoundError(f"Party with ID {party_id} not found")


@transaction.atomic
def join_party(*, party_id: UUID, user: User) -> PartyAttendance:
    """
    Add a user to a party's attendees.

    Joining twice is harmless: an existing attendee gets their membership
    back without a capacity check.

    Args:
        party_id: UUID of the party
        user: User joining

    Returns:
        The user's PartyAttendance

    Raises:
        PartyNotFoundError: If party doesn't exist
        PartyFullError: If the party is at max_attendees
    """
    party = _lock_party(party_id)

    existing = PartyAttendance.objects.filter(party=party, user=user).first()
    if existing is not None:
        return existing

    if party.max_attendees is not None:
        if party.attendances.count() >= party.max_attendees:
            logger.info("party_full", party_id=str(party.id), user_id=str(user.id))
            raise PartyFullError(f"{party.title} is full")

    try:
        with transaction.atomic():
            attendance = PartyAttendance.objects.create(party=party, user=user)
    except IntegrityError:
        return PartyAttendance.objects.get(party=party, user=user)

    logger.info("party_joined", party_id=str(party.id), user_id=str(user.id))
    return attendance


@transaction.atomic
def leave_party(*, party_id: UUID, user: User) -> None:
    """
    Remove a user from a party's attendees.

    Leaving a party the user never joined does nothing.

    Raises:
        PartyNotFoundError: If party doesn't exist
        HostCannotLeaveError: If user is the host
    """
    party = _lock_party(party_id)

    if party.host_id == user.id:
        logger.info("host_leave_rejected", party_id=str(party.id))
        raise HostCannotLeaveError("The host cannot leave their own party")

    deleted, _ = PartyAttendance.objects.filter(party=party, user=user).delete()
    if deleted:
        logger.info("party_left", party_id=str(party.id), user_id=str(user.id))


def get_party_attendees(*, party_id: UUID) -> List[PartyAttendance]:
    """
    Get a party's attendances in join order.

    Raises:
        PartyNotFoundError: If party doesn't exist
    """
    if not Party.objects.filter(id=party_id).exists():
        raise PartyNotFoundError(f"Party with ID {party_id} not found")

    return list(
        PartyAttendance.objects
        .filter(party_id=party_id)
        .select_related('user')
        .order_by('joined_at')
    )


def is_attendee(*, party: Party, user: User) -> bool:
    """Return True if ``user`` attends ``party``."""
    return party.has_attendee(user)
