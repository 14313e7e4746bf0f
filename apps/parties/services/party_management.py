"""
Party record store.

Creates, loads, lists and updates parties. Listing goes through
run_with_fallback so a failing indexed query degrades to a bounded scan.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.parties.models import Party, PartyAttendance
from config.logging import get_logger

from .exceptions import (
    PartyNotFoundError,
    InvalidPartyError,
    NotPartyHostError,
)
from .query_fallback import run_with_fallback, scan_limit

logger = get_logger(__name__)

UPDATABLE_FIELDS = {
    'title',
    'description',
    'location',
    'date_time',
    'max_attendees',
    'requires_payment',
    'payment_amount',
    'venmo_username',
    'payment_description',
}


def _validate_party_fields(
    *,
    max_attendees: Optional[int],
    requires_payment: bool,
    payment_amount: Optional[Decimal],
    venmo_username: str,
) -> None:
    if max_attendees is not None and max_attendees < 1:
        raise InvalidPartyError("max_attendees must be at least 1")

    if requires_payment:
        if payment_amount is None or Decimal(payment_amount) <= 0:
            raise InvalidPartyError("Paid parties need a payment amount greater than zero")
        if not (venmo_username or '').strip():
            raise InvalidPartyError("Paid parties need a Venmo username to receive payments")


@transaction.atomic
def create_party(
    *,
    host: User,
    title: str,
    location: str,
    date_time: datetime,
    description: str = "",
    max_attendees: Optional[int] = None,
    requires_payment: bool = False,
    payment_amount: Optional[Decimal] = None,
    venmo_username: str = "",
    payment_description: str = "",
    university: Optional[str] = None,
) -> Party:
    """
    Create a party and enrol the host as its first attendee.

    Args:
        host: User hosting the party
        title: Party title
        location: Where the party is
        date_time: When the party starts
        description: Optional description
        max_attendees: Optional capacity (host included)
        requires_payment: Whether joining requires a payment
        payment_amount: Amount due per attendee when paid
        venmo_username: Recipient handle for payments
        payment_description: Note shown with payment instructions
        university: Defaults to the host's university

    Returns:
        Created Party instance

    Raises:
        InvalidPartyError: If payment or capacity fields are inconsistent
    """
    venmo_username = (venmo_username or '').strip().lstrip('@')
    _validate_party_fields(
        max_attendees=max_attendees,
        requires_payment=requires_payment,
        payment_amount=payment_amount,
        venmo_username=venmo_username,
    )

    party = Party.objects.create(
        host=host,
        title=title,
        description=description,
        location=location,
        date_time=date_time,
        max_attendees=max_attendees,
        requires_payment=requires_payment,
        payment_amount=payment_amount if requires_payment else None,
        venmo_username=venmo_username,
        payment_description=payment_description,
        university=university or host.university,
    )
    PartyAttendance.objects.create(party=party, user=host)

    logger.info("party_created", party_id=str(party.id), host_id=str(host.id))
    return party


def get_party_by_id(*, party_id: UUID) -> Party:
    """
    Get a party by ID with its host loaded.

    Raises:
        PartyNotFoundError: If party doesn't exist
    """
    try:
        return Party.objects.select_related('host').get(id=party_id)
    except Party.DoesNotExist:
        raise PartyNotFoundError(f"Party with ID {party_id} not found")


def _scan(predicate) -> List[Party]:
    rows = Party.objects.select_related('host').order_by()[:scan_limit()]
    return sorted((p for p in rows if predicate(p)), key=lambda p: p.date_time)


def list_parties(*, university: Optional[str] = None) -> List[Party]:
    """
    List parties ordered by start time, optionally for one university.

    Returns:
        Parties ordered by date_time ascending
    """
    def primary():
        qs = Party.objects.select_related('host')
        if university:
            qs = qs.filter(university=university)
        return list(qs.order_by('date_time'))

    def fallback():
        return _scan(lambda p: not university or p.university == university)

    return run_with_fallback(primary, fallback, 'list_parties')


def list_hosted_parties(*, user: User, university: Optional[str] = None) -> List[Party]:
    """List parties hosted by ``user``, ordered by start time."""
    def primary():
        qs = Party.objects.select_related('host').filter(host=user)
        if university:
            qs = qs.filter(university=university)
        return list(qs.order_by('date_time'))

    def fallback():
        return _scan(
            lambda p: p.host_id == user.id and (not university or p.university == university)
        )

    return run_with_fallback(primary, fallback, 'list_hosted_parties')


def list_joined_parties(*, user: User) -> List[Party]:
    """List parties ``user`` attends (hosted ones included), ordered by start time."""
    def primary():
        return list(
            user.joined_parties
            .select_related('host')
            .order_by('date_time')
        )

    def fallback():
        joined_ids = set(
            PartyAttendance.objects
            .filter(user=user)
            .values_list('party_id', flat=True)[:scan_limit()]
        )
        return _scan(lambda p: p.id in joined_ids)

    return run_with_fallback(primary, fallback, 'list_joined_parties')


@transaction.atomic
def update_party(*, party_id: UUID, user: User, **fields) -> Party:
    """
    Update party details (host only).

    Args:
        party_id: UUID of the party
        user: User performing the update
        **fields: Fields to update; unknown fields and ``host`` are ignored

    Returns:
        Updated Party instance

    Raises:
        PartyNotFoundError: If party doesn't exist
        NotPartyHostError: If user is not the host
        InvalidPartyError: If the result would break payment or capacity rules
    """
    try:
        party = Party.objects.select_for_update().get(id=party_id)
    except Party.DoesNotExist:
        raise PartyNotFoundError(f"Party with ID {party_id} not found")

    if party.host_id != user.id:
        raise NotPartyHostError("Only the host can update this party")

    changes = {k: v for k, v in fields.items() if k in UPDATABLE_FIELDS}
    if 'venmo_username' in changes:
        changes['venmo_username'] = (changes['venmo_username'] or '').strip().lstrip('@')

    for field, value in changes.items():
        setattr(party, field, value)

    _validate_party_fields(
        max_attendees=party.max_attendees,
        requires_payment=party.requires_payment,
        payment_amount=party.payment_amount,
        venmo_username=party.venmo_username,
    )

    if 'max_attendees' in changes and party.max_attendees is not None:
        current = party.attendances.count()
        if party.max_attendees < current:
            raise InvalidPartyError(
                f"max_attendees cannot be below the current attendee count ({current})"
            )

    if not party.requires_payment:
        party.payment_amount = None

    party.save()
    return party
