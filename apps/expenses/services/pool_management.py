"""
Expense pool management service.

A pool collects the people sharing a party's costs. Balances compare what
each participant paid against an even, cent-exact share of the party's
expenses.
"""

from decimal import Decimal
from typing import List
from uuid import UUID

from django.db import transaction
from django.db.models import Sum

from apps.accounts.models import User
from apps.expenses.models import ExpensePool, PoolParticipant, Expense
from apps.parties.services import get_party_by_id, is_attendee
from config.logging import get_logger

from .exceptions import (
    ExpensePoolNotFoundError,
    NotAttendeeError,
    CreatorCannotLeaveError,
    NotPoolCreatorError,
)
from .splitting import calculate_splits

logger = get_logger(__name__)


def _get_pool(pool_id: UUID, lock: bool = False) -> ExpensePool:
    qs = ExpensePool.objects.select_related('party', 'creator')
    if lock:
        qs = qs.select_for_update()
    try:
        return qs.get(id=pool_id)
    except ExpensePool.DoesNotExist:
        raise ExpensePoolNotFoundError(f"Expense pool with ID {pool_id} not found")


@transaction.atomic
def create_expense_pool(
    *,
    party_id: UUID,
    creator: User,
    name: str,
    description: str = "",
    total_amount: Decimal = Decimal('0'),
    venmo_username: str = "",
) -> ExpensePool:
    """
    Create an expense pool with its creator as first participant.

    Raises:
        PartyNotFoundError: If party doesn't exist
        NotAttendeeError: If creator is not attending the party
    """
    party = get_party_by_id(party_id=party_id)

    if not is_attendee(party=party, user=creator):
        raise NotAttendeeError("Only party attendees can create an expense pool")

    pool = ExpensePool.objects.create(
        party=party,
        creator=creator,
        name=name,
        description=description,
        total_amount=total_amount,
        venmo_username=(venmo_username or creator.venmo_username).strip().lstrip('@'),
    )
    PoolParticipant.objects.create(pool=pool, user=creator)

    logger.info("expense_pool_created", pool_id=str(pool.id), party_id=str(party.id))
    return pool


def get_party_expense_pools(*, party_id: UUID) -> List[ExpensePool]:
    """Active pools for a party, newest first."""
    return list(
        ExpensePool.objects
        .filter(party_id=party_id, is_active=True)
        .select_related('creator')
        .prefetch_related('participants')
        .order_by('-created_at')
    )


@transaction.atomic
def join_expense_pool(*, pool_id: UUID, user: User) -> ExpensePool:
    """
    Join a pool. Joining twice is a no-op.

    Raises:
        ExpensePoolNotFoundError: If pool doesn't exist
        NotAttendeeError: If user is not attending the pool's party
    """
    pool = _get_pool(pool_id, lock=True)

    if not is_attendee(party=pool.party, user=user):
        raise NotAttendeeError("Only party attendees can join an expense pool")

    PoolParticipant.objects.get_or_create(pool=pool, user=user)
    return pool


@transaction.atomic
def leave_expense_pool(*, pool_id: UUID, user: User) -> ExpensePool:
    """
    Leave a pool. Leaving a pool you are not in is a no-op.

    Raises:
        ExpensePoolNotFoundError: If pool doesn't exist
        CreatorCannotLeaveError: If user created the pool
    """
    pool = _get_pool(pool_id, lock=True)

    if pool.creator_id == user.id:
        raise CreatorCannotLeaveError("The pool creator cannot leave the pool")

    PoolParticipant.objects.filter(pool=pool, user=user).delete()
    return pool


def get_pool_participants(pool: ExpensePool) -> List[User]:
    """Participants in join order."""
    return [m.user for m in pool.memberships.select_related('user').order_by('joined_at')]


def calculate_balances(*, pool_id: UUID) -> List[dict]:
    """
    Compute each pool participant's balance against the party's expenses.

    The party's total spend is split evenly and cent-exactly among the
    participants (earlier joiners absorb remainder cents). Only payments
    made by participants count towards ``paid``.

    Returns:
        One dict per participant with user_id, username, paid, owes, owed
        and net_balance (Decimal)

    Raises:
        ExpensePoolNotFoundError: If pool doesn't exist
    """
    pool = _get_pool(pool_id)
    participants = get_pool_participants(pool)

    expenses = Expense.objects.filter(party_id=pool.party_id)
    total = expenses.aggregate(total=Sum('amount'))['total'] or Decimal('0')

    paid_by_user = {
        row['paid_by']: row['paid']
        for row in expenses.order_by().values('paid_by').annotate(paid=Sum('amount'))
    }

    balances = []
    for user, share in calculate_splits(total, participants):
        paid = paid_by_user.get(user.id, Decimal('0'))
        net = paid - share
        balances.append({
            'user_id': user.id,
            'username': user.get_display_name(),
            'paid': paid,
            'share': share,
            'owes': -net if net < 0 else Decimal('0'),
            'owed': net if net > 0 else Decimal('0'),
            'net_balance': net,
        })

    return balances


@transaction.atomic
def settle_expense_pool(*, pool_id: UUID, user: User) -> ExpensePool:
    """
    Mark a pool settled (creator only).

    Raises:
        ExpensePoolNotFoundError: If pool doesn't exist
        NotPoolCreatorError: If user did not create the pool
    """
    pool = _get_pool(pool_id, lock=True)

    if pool.creator_id != user.id:
        raise NotPoolCreatorError("Only the pool creator can settle the pool")

    pool.is_settled = True
    pool.save(update_fields=['is_settled', 'updated_at'])

    logger.info("expense_pool_settled", pool_id=str(pool.id))
    return pool
