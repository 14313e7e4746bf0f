"""
Payment gate for paid parties.

Payments happen off-platform through Venmo. Users self-report a
transaction reference, which is stored as-is and marks them paid. Nothing
checks the reference against Venmo; hosts reconcile payments themselves.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from urllib.parse import urlencode, quote
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.parties.models import Party, PartyAttendance, PartyPayment
from config.logging import get_logger

from .exceptions import (
    PaymentNotRequiredError,
    InvalidPaymentReferenceError,
)
from .membership_management import join_party
from .party_management import get_party_by_id

logger = get_logger(__name__)

DEFAULT_PAYMENT_NOTE = "Party payment"


class JoinOutcome:
    JOINED = 'joined'
    ALREADY_JOINED = 'already_joined'
    PAYMENT_REQUIRED = 'payment_required'


@dataclass(frozen=True)
class JoinResult:
    outcome: str
    attendance: Optional[PartyAttendance] = None


def check_payment_status(*, party_id: UUID, user: User) -> dict:
    """
    Report whether ``user`` has paid for a party.

    A missing payment record means not paid.

    Returns:
        ``{"is_paid": bool}``
    """
    payment = PartyPayment.objects.filter(party_id=party_id, user=user).first()
    return {'is_paid': bool(payment and payment.is_paid)}


@transaction.atomic
def submit_payment_reference(*, party_id: UUID, user: User, reference: str) -> PartyPayment:
    """
    Record a user's Venmo transaction reference and mark them paid.

    Args:
        party_id: UUID of the party
        user: User who paid
        reference: Free-text transaction reference

    Returns:
        The user's PartyPayment

    Raises:
        PartyNotFoundError: If party doesn't exist
        PaymentNotRequiredError: If the party is free
        InvalidPaymentReferenceError: If the reference is blank
    """
    party = get_party_by_id(party_id=party_id)

    if not party.requires_payment:
        raise PaymentNotRequiredError("This party does not require payment")

    reference = (reference or '').strip()
    if not reference:
        raise InvalidPaymentReferenceError("A transaction reference is required")

    payment, _ = PartyPayment.objects.select_for_update().get_or_create(party=party, user=user)
    payment.transaction_reference = reference
    payment.is_paid = True
    payment.paid_at = timezone.now()
    payment.save()

    logger.info("party_payment_recorded", party_id=str(party.id), user_id=str(user.id))
    return payment


def request_join(*, party_id: UUID, user: User) -> JoinResult:
    """
    Join a party, checking membership and payment first.

    Returns:
        JoinResult with outcome ALREADY_JOINED, PAYMENT_REQUIRED or JOINED.
        Only JOINED mutates anything.

    Raises:
        PartyNotFoundError: If party doesn't exist
        PartyFullError: If the party is at capacity
    """
    party = get_party_by_id(party_id=party_id)

    existing = PartyAttendance.objects.filter(party=party, user=user).first()
    if existing is not None:
        return JoinResult(JoinOutcome.ALREADY_JOINED, existing)

    if party.requires_payment and not check_payment_status(party_id=party.id, user=user)['is_paid']:
        return JoinResult(JoinOutcome.PAYMENT_REQUIRED)

    attendance = join_party(party_id=party.id, user=user)
    return JoinResult(JoinOutcome.JOINED, attendance)


def build_payment_instructions(party: Party) -> dict:
    """
    Build Venmo payment instructions for a paid party.

    Returns:
        Dict with amount, recipient, note, the ``venmo://`` app URL and the
        web profile fallback URL
    """
    amount = party.payment_amount or Decimal('0')
    note = party.payment_description or DEFAULT_PAYMENT_NOTE
    handle = party.venmo_username

    query = urlencode(
        {
            'txn': 'pay',
            'recipients': handle,
            'amount': f"{amount:.2f}",
            'note': note,
        },
        quote_via=quote,
    )

    return {
        'amount': f"{amount:.2f}",
        'recipient': handle,
        'note': note,
        'app_url': f"venmo://paycharge?{query}",
        'web_url': f"https://venmo.com/{quote(handle)}",
    }
