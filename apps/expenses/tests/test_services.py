"""
Service layer unit tests for expenses app.

Tests cover:
- Cent-exact splitting
- Pool membership rules
- Expense recording and settlement
- Balance calculation
"""

import pytest
from decimal import Decimal
from uuid import uuid4

from apps.expenses.models import PoolParticipant
from apps.expenses.services import (
    calculate_splits,
    create_expense_pool,
    get_party_expense_pools,
    join_expense_pool,
    leave_expense_pool,
    calculate_balances,
    settle_expense_pool,
    add_expense,
    get_party_expenses,
    get_user_expenses_to_settle,
    get_user_paid_expenses,
    settle_expense,
)
from apps.expenses.services.exceptions import (
    ExpensePoolNotFoundError,
    ExpenseNotFoundError,
    NotAttendeeError,
    CreatorCannotLeaveError,
    NotPoolCreatorError,
    InvalidExpenseError,
    InvalidSplitError,
)


# =============================================================================
# Splitting Tests
# =============================================================================

class TestCalculateSplits:
    """Tests for splitting.calculate_splits."""

    def test_even_split(self):
        shares = calculate_splits(Decimal('9.00'), ['a', 'b', 'c'])
        assert [s for _, s in shares] == [Decimal('3.00')] * 3

    def test_remainder_goes_to_first(self):
        shares = calculate_splits(Decimal('10.00'), ['a', 'b', 'c'])

        assert shares == [
            ('a', Decimal('3.34')),
            ('b', Decimal('3.33')),
            ('c', Decimal('3.33')),
        ]

    @pytest.mark.parametrize('total,count', [
        (Decimal('0.01'), 3),
        (Decimal('100.00'), 7),
        (Decimal('57.89'), 4),
        (Decimal('0'), 2),
    ])
    def test_shares_sum_to_total(self, total, count):
        shares = calculate_splits(total, list(range(count)))
        assert sum(s for _, s in shares) == total

    def test_no_participants(self):
        with pytest.raises(InvalidSplitError):
            calculate_splits(Decimal('5.00'), [])


# =============================================================================
# Pool Tests
# =============================================================================

@pytest.mark.django_db
class TestPools:
    """Tests for pool_management.py."""

    def test_create_pool_adds_creator(self, party, alice):
        pool = create_expense_pool(party_id=party.id, creator=alice, name='Snacks')

        assert list(pool.participants.all()) == [alice]

    def test_outsider_cannot_create(self, party, outsider):
        with pytest.raises(NotAttendeeError):
            create_expense_pool(party_id=party.id, creator=outsider, name='Snacks')

    def test_join_and_leave_idempotent(self, party, alice, bob):
        pool = create_expense_pool(party_id=party.id, creator=alice, name='Snacks')

        join_expense_pool(pool_id=pool.id, user=bob)
        join_expense_pool(pool_id=pool.id, user=bob)
        assert PoolParticipant.objects.filter(pool=pool, user=bob).count() == 1

        leave_expense_pool(pool_id=pool.id, user=bob)
        leave_expense_pool(pool_id=pool.id, user=bob)
        assert not PoolParticipant.objects.filter(pool=pool, user=bob).exists()

    def test_outsider_cannot_join(self, party, alice, outsider):
        pool = create_expense_pool(party_id=party.id, creator=alice, name='Snacks')

        with pytest.raises(NotAttendeeError):
            join_expense_pool(pool_id=pool.id, user=outsider)

    def test_creator_cannot_leave(self, party, alice):
        pool = create_expense_pool(party_id=party.id, creator=alice, name='Snacks')

        with pytest.raises(CreatorCannotLeaveError):
            leave_expense_pool(pool_id=pool.id, user=alice)

    def test_missing_pool(self, alice):
        with pytest.raises(ExpensePoolNotFoundError):
            join_expense_pool(pool_id=uuid4(), user=alice)

    def test_list_only_active(self, party, alice):
        kept = create_expense_pool(party_id=party.id, creator=alice, name='Kept')
        closed = create_expense_pool(party_id=party.id, creator=alice, name='Closed')
        closed.is_active = False
        closed.save()

        assert get_party_expense_pools(party_id=party.id) == [kept]

    def test_settle_creator_only(self, party, alice, bob):
        pool = create_expense_pool(party_id=party.id, creator=alice, name='Snacks')

        with pytest.raises(NotPoolCreatorError):
            settle_expense_pool(pool_id=pool.id, user=bob)

        assert settle_expense_pool(pool_id=pool.id, user=alice).is_settled is True


# =============================================================================
# Expense Tests
# =============================================================================

@pytest.mark.django_db
class TestExpenses:
    """Tests for expense_management.py."""

    def test_split_defaults_to_all_attendees(self, party, host_user, alice, bob):
        expense = add_expense(party_id=party.id, paid_by=alice, amount=Decimal('30.00'))

        assert set(expense.split_with.all()) == {host_user, alice, bob}

    def test_explicit_split(self, party, alice, bob):
        expense = add_expense(
            party_id=party.id, paid_by=alice, amount=Decimal('8.00'), split_with=[alice, bob]
        )
        assert set(expense.split_with.all()) == {alice, bob}

    def test_split_with_outsider_rejected(self, party, alice, outsider):
        with pytest.raises(NotAttendeeError):
            add_expense(party_id=party.id, paid_by=alice, amount=Decimal('5.00'), split_with=[outsider])

    def test_outsider_cannot_pay(self, party, outsider):
        with pytest.raises(NotAttendeeError):
            add_expense(party_id=party.id, paid_by=outsider, amount=Decimal('5.00'))

    @pytest.mark.parametrize('amount', [Decimal('0'), Decimal('-1.00')])
    def test_amount_must_be_positive(self, party, alice, amount):
        with pytest.raises(InvalidExpenseError):
            add_expense(party_id=party.id, paid_by=alice, amount=amount)

    def test_to_settle_and_settle(self, party, alice, bob):
        expense = add_expense(party_id=party.id, paid_by=alice, amount=Decimal('12.00'))

        assert get_user_expenses_to_settle(user=bob) == [expense]
        assert get_user_expenses_to_settle(user=alice) == []

        settle_expense(expense_id=expense.id, user=bob)
        settle_expense(expense_id=expense.id, user=bob)

        assert get_user_expenses_to_settle(user=bob) == []
        assert list(expense.settled_by.all()) == [bob]

    def test_paid_and_party_listing(self, party, alice, bob):
        first = add_expense(party_id=party.id, paid_by=alice, amount=Decimal('1.00'))
        second = add_expense(party_id=party.id, paid_by=bob, amount=Decimal('2.00'))

        assert get_user_paid_expenses(user=alice) == [first]
        assert set(get_party_expenses(party_id=party.id)) == {first, second}

    def test_settle_missing(self, alice):
        with pytest.raises(ExpenseNotFoundError):
            settle_expense(expense_id=uuid4(), user=alice)


# =============================================================================
# Balance Tests
# =============================================================================

@pytest.mark.django_db
class TestBalances:
    """Tests for calculate_balances."""

    def test_balances_cent_exact(self, party, host_user, alice, bob):
        pool = create_expense_pool(party_id=party.id, creator=alice, name='Supplies')
        join_expense_pool(pool_id=pool.id, user=bob)
        join_expense_pool(pool_id=pool.id, user=host_user)

        add_expense(party_id=party.id, paid_by=alice, amount=Decimal('10.00'))

        balances = {b['user_id']: b for b in calculate_balances(pool_id=pool.id)}

        assert balances[alice.id]['share'] == Decimal('3.34')
        assert balances[alice.id]['paid'] == Decimal('10.00')
        assert balances[alice.id]['owed'] == Decimal('6.66')
        assert balances[bob.id]['owes'] == Decimal('3.33')
        assert balances[host_user.id]['owes'] == Decimal('3.33')
        assert sum(b['net_balance'] for b in balances.values()) == Decimal('0')

    def test_payments_by_non_participants_ignored(self, party, alice, bob):
        pool = create_expense_pool(party_id=party.id, creator=alice, name='Supplies')
        add_expense(party_id=party.id, paid_by=bob, amount=Decimal('4.00'))

        [balance] = calculate_balances(pool_id=pool.id)

        assert balance['paid'] == Decimal('0')
        assert balance['owes'] == Decimal('4.00')
