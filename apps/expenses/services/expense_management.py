"""
Expense management service.

Records individual costs and tracks who has settled their part.
"""

from decimal import Decimal
from typing import Iterable, List, Optional
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.expenses.models import Expense
from apps.parties.models import PartyAttendance
from apps.parties.services import get_party_by_id
from config.logging import get_logger

from .exceptions import (
    ExpenseNotFoundError,
    NotAttendeeError,
    InvalidExpenseError,
)

logger = get_logger(__name__)


@transaction.atomic
def add_expense(
    *,
    party_id: UUID,
    paid_by: User,
    amount: Decimal,
    description: str = "",
    split_with: Optional[Iterable[User]] = None,
) -> Expense:
    """
    Record a cost paid by one attendee.

    Args:
        party_id: UUID of the party
        paid_by: Attendee who paid
        amount: Amount paid, greater than zero
        description: What it was for
        split_with: Users sharing the cost; defaults to every attendee

    Returns:
        Created Expense

    Raises:
        PartyNotFoundError: If party doesn't exist
        InvalidExpenseError: If amount is not positive
        NotAttendeeError: If the payer or a split member is not attending
    """
    party = get_party_by_id(party_id=party_id)

    if amount is None or Decimal(amount) <= 0:
        raise InvalidExpenseError("Expense amount must be greater than zero")

    attendee_ids = set(
        PartyAttendance.objects.filter(party=party).values_list('user_id', flat=True)
    )

    if paid_by.id not in attendee_ids:
        raise NotAttendeeError("Only party attendees can add expenses")

    if split_with is None:
        split_ids = attendee_ids
    else:
        split_ids = {u.id for u in split_with}
        if not split_ids <= attendee_ids:
            raise NotAttendeeError("Expenses can only be split with party attendees")

    expense = Expense.objects.create(
        party=party,
        paid_by=paid_by,
        amount=amount,
        description=description,
    )
    expense.split_with.set(split_ids)

    logger.info(
        "expense_added",
        expense_id=str(expense.id),
        party_id=str(party.id),
        amount=str(amount),
        split_count=len(split_ids),
    )
    return expense


def get_party_expenses(*, party_id: UUID) -> List[Expense]:
    """Expenses for a party, newest first."""
    return list(
        Expense.objects
        .filter(party_id=party_id)
        .select_related('paid_by')
        .prefetch_related('split_with', 'settled_by')
        .order_by('-created_at')
    )


def get_user_expenses_to_settle(*, user: User) -> List[Expense]:
    """Expenses shared with ``user`` that someone else paid and ``user`` has not settled."""
    return list(
        Expense.objects
        .filter(split_with=user)
        .exclude(paid_by=user)
        .exclude(settled_by=user)
        .select_related('paid_by', 'party')
        .order_by('-created_at')
    )


def get_user_paid_expenses(*, user: User) -> List[Expense]:
    """Expenses ``user`` paid, newest first."""
    return list(
        Expense.objects
        .filter(paid_by=user)
        .select_related('party')
        .prefetch_related('split_with', 'settled_by')
        .order_by('-created_at')
    )


@transaction.atomic
def settle_expense(*, expense_id: UUID, user: User) -> Expense:
    """
    Mark ``user``'s part of an expense as settled. Settling twice is a no-op.

    Raises:
        ExpenseNotFoundError: If expense doesn't exist
    """
    try:
        expense = Expense.objects.select_for_update().get(id=expense_id)
    except Expense.DoesNotExist:
        raise ExpenseNotFoundError(f"Expense with ID {expense_id} not found")

    expense.settled_by.add(user)
    return expense
