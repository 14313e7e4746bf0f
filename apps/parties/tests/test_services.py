"""
Service layer unit tests for parties app.

Tests cover:
- Party creation and validation
- Membership (capacity, idempotent join, host cannot leave)
- Payment gate
- Derived viewer flags
- Query fallback
"""

import pytest
from datetime import timedelta
from decimal import Decimal
from unittest.mock import patch
from uuid import uuid4

from django.db import DatabaseError, OperationalError, connection, transaction
from django.utils import timezone

from apps.parties.models import Party, PartyAttendance, PartyPayment
from apps.parties.services import (
    create_party,
    get_party_by_id,
    list_parties,
    list_hosted_parties,
    list_joined_parties,
    update_party,
    join_party,
    leave_party,
    get_party_attendees,
    check_payment_status,
    submit_payment_reference,
    request_join,
    build_payment_instructions,
    compose_party_view,
    is_party_over,
    run_with_fallback,
    JoinOutcome,
)
from apps.parties.services.exceptions import (
    PartyNotFoundError,
    InvalidPartyError,
    NotPartyHostError,
    PartyFullError,
    HostCannotLeaveError,
    PaymentNotRequiredError,
    InvalidPaymentReferenceError,
)


def attendee_ids(party):
    return set(PartyAttendance.objects.filter(party=party).values_list('user_id', flat=True))


# =============================================================================
# Party Management Service Tests
# =============================================================================

@pytest.mark.django_db
class TestPartyManagement:
    """Tests for party_management.py service functions."""

    def test_create_party_enrols_host(self, host_user):
        party = create_party(
            host=host_user,
            title='Kickoff',
            location='Sayles Hill',
            date_time=timezone.now() + timedelta(days=1),
        )

        assert party.host == host_user
        assert party.university == 'Carleton College'
        assert attendee_ids(party) == {host_user.id}

    def test_create_party_university_override(self, host_user):
        party = create_party(
            host=host_user,
            title='Road Trip',
            location='Northfield',
            date_time=timezone.now() + timedelta(days=1),
            university='St. Olaf College',
        )
        assert party.university == 'St. Olaf College'

    def test_create_paid_party_requires_amount(self, host_user):
        with pytest.raises(InvalidPartyError):
            create_party(
                host=host_user,
                title='Paid',
                location='Here',
                date_time=timezone.now() + timedelta(days=1),
                requires_payment=True,
                venmo_username='host-pay',
            )
        assert not Party.objects.filter(title='Paid').exists()

    def test_create_paid_party_requires_handle(self, host_user):
        with pytest.raises(InvalidPartyError):
            create_party(
                host=host_user,
                title='Paid',
                location='Here',
                date_time=timezone.now() + timedelta(days=1),
                requires_payment=True,
                payment_amount=Decimal('5.00'),
            )

    def test_create_paid_party_strips_at(self, host_user):
        party = create_party(
            host=host_user,
            title='Paid',
            location='Here',
            date_time=timezone.now() + timedelta(days=1),
            requires_payment=True,
            payment_amount=Decimal('5.00'),
            venmo_username='@host-pay',
        )
        assert party.venmo_username == 'host-pay'

    def test_get_party_by_id_missing(self, db):
        with pytest.raises(PartyNotFoundError):
            get_party_by_id(party_id=uuid4())

    def test_list_parties_filters_and_orders(self, host_user, other_school_user):
        later = create_party(
            host=host_user, title='Later', location='A',
            date_time=timezone.now() + timedelta(days=5),
        )
        sooner = create_party(
            host=host_user, title='Sooner', location='B',
            date_time=timezone.now() + timedelta(days=1),
        )
        create_party(
            host=other_school_user, title='Elsewhere', location='C',
            date_time=timezone.now() + timedelta(days=2),
        )

        result = list_parties(university='Carleton College')

        assert result == [sooner, later]
        assert len(list_parties()) == 3

    def test_list_hosted_and_joined(self, party, guest_user, second_guest):
        join_party(party_id=party.id, user=guest_user)

        assert list_hosted_parties(user=party.host) == [party]
        assert list_hosted_parties(user=guest_user) == []
        assert list_joined_parties(user=guest_user) == [party]
        assert list_joined_parties(user=second_guest) == []

    def test_update_party_host_only(self, party, guest_user):
        with pytest.raises(NotPartyHostError):
            update_party(party_id=party.id, user=guest_user, title='Hijacked')

    def test_update_party_ignores_host_field(self, party, guest_user):
        updated = update_party(party_id=party.id, user=party.host, title='Renamed', host=guest_user)

        assert updated.title == 'Renamed'
        assert updated.host_id == party.host_id

    def test_update_capacity_below_attendees(self, party, guest_user, second_guest):
        join_party(party_id=party.id, user=guest_user)
        join_party(party_id=party.id, user=second_guest)

        with pytest.raises(InvalidPartyError):
            update_party(party_id=party.id, user=party.host, max_attendees=2)

        party.refresh_from_db()
        assert party.max_attendees is None


# =============================================================================
# Membership Service Tests
# =============================================================================

@pytest.mark.django_db
class TestMembership:
    """Tests for membership_management.py service functions."""

    def test_join_party(self, party, guest_user):
        attendance = join_party(party_id=party.id, user=guest_user)

        assert attendance.user == guest_user
        assert guest_user.id in attendee_ids(party)
        assert party in guest_user.joined_parties.all()

    def test_join_is_idempotent(self, party, guest_user):
        first = join_party(party_id=party.id, user=guest_user)
        second = join_party(party_id=party.id, user=guest_user)

        assert first.id == second.id
        assert PartyAttendance.objects.filter(party=party, user=guest_user).count() == 1

    def test_join_full_party(self, small_party, guest_user, second_guest):
        join_party(party_id=small_party.id, user=guest_user)

        with pytest.raises(PartyFullError):
            join_party(party_id=small_party.id, user=second_guest)

        assert attendee_ids(small_party) == {small_party.host_id, guest_user.id}

    def test_existing_attendee_can_rejoin_full_party(self, small_party, guest_user):
        join_party(party_id=small_party.id, user=guest_user)
        attendance = join_party(party_id=small_party.id, user=guest_user)
        assert attendance.user == guest_user

    def test_sequential_joins_never_exceed_capacity(self, host_user, django_user_model):
        party = create_party(
            host=host_user, title='Cap', location='X',
            date_time=timezone.now() + timedelta(days=1), max_attendees=3,
        )
        for i in range(6):
            user = django_user_model.objects.create_user(
                email=f'joiner{i}@carleton.edu', password='TestPass123!',
                university='Carleton College',
            )
            try:
                join_party(party_id=party.id, user=user)
            except PartyFullError:
                pass

        assert party.attendances.count() == 3

    def test_join_missing_party(self, guest_user):
        with pytest.raises(PartyNotFoundError):
            join_party(party_id=uuid4(), user=guest_user)

    def test_host_cannot_leave(self, party):
        with pytest.raises(HostCannotLeaveError):
            leave_party(party_id=party.id, user=party.host)
        assert party.host_id in attendee_ids(party)

    def test_join_then_leave_restores_attendees(self, party, guest_user):
        before = attendee_ids(party)

        join_party(party_id=party.id, user=guest_user)
        leave_party(party_id=party.id, user=guest_user)

        assert attendee_ids(party) == before

    def test_leave_non_member_is_noop(self, party, guest_user):
        leave_party(party_id=party.id, user=guest_user)
        assert attendee_ids(party) == {party.host_id}

    def test_get_party_attendees_in_join_order(self, party, guest_user, second_guest):
        join_party(party_id=party.id, user=guest_user)
        join_party(party_id=party.id, user=second_guest)

        users = [a.user for a in get_party_attendees(party_id=party.id)]
        assert users == [party.host, guest_user, second_guest]


# =============================================================================
# Payment Gate Tests
# =============================================================================

@pytest.mark.django_db
class TestPaymentGate:
    """Tests for payment_gate.py service functions."""

    def test_no_record_means_unpaid(self, paid_party, guest_user):
        assert check_payment_status(party_id=paid_party.id, user=guest_user) == {'is_paid': False}

    def test_request_join_requires_payment(self, paid_party, guest_user):
        before = attendee_ids(paid_party)

        result = request_join(party_id=paid_party.id, user=guest_user)

        assert result.outcome == JoinOutcome.PAYMENT_REQUIRED
        assert result.attendance is None
        assert attendee_ids(paid_party) == before

    def test_submit_reference_then_join(self, paid_party, guest_user):
        payment = submit_payment_reference(
            party_id=paid_party.id, user=guest_user, reference='  3141592653  '
        )

        assert payment.is_paid is True
        assert payment.transaction_reference == '3141592653'
        assert payment.paid_at is not None
        assert check_payment_status(party_id=paid_party.id, user=guest_user) == {'is_paid': True}

        result = request_join(party_id=paid_party.id, user=guest_user)
        assert result.outcome == JoinOutcome.JOINED
        assert guest_user.id in attendee_ids(paid_party)

    def test_resubmitting_updates_single_record(self, paid_party, guest_user):
        submit_payment_reference(party_id=paid_party.id, user=guest_user, reference='first')
        submit_payment_reference(party_id=paid_party.id, user=guest_user, reference='second')

        payments = PartyPayment.objects.filter(party=paid_party, user=guest_user)
        assert payments.count() == 1
        assert payments.get().transaction_reference == 'second'

    def test_blank_reference_rejected(self, paid_party, guest_user):
        with pytest.raises(InvalidPaymentReferenceError):
            submit_payment_reference(party_id=paid_party.id, user=guest_user, reference='   ')

    def test_free_party_rejects_payment(self, party, guest_user):
        with pytest.raises(PaymentNotRequiredError):
            submit_payment_reference(party_id=party.id, user=guest_user, reference='abc')

    def test_request_join_already_joined(self, party, guest_user):
        join_party(party_id=party.id, user=guest_user)

        result = request_join(party_id=party.id, user=guest_user)

        assert result.outcome == JoinOutcome.ALREADY_JOINED
        assert result.attendance.user == guest_user

    def test_host_of_paid_party_is_already_joined(self, paid_party):
        result = request_join(party_id=paid_party.id, user=paid_party.host)
        assert result.outcome == JoinOutcome.ALREADY_JOINED

    def test_request_join_free_party(self, party, guest_user):
        result = request_join(party_id=party.id, user=guest_user)
        assert result.outcome == JoinOutcome.JOINED

    def test_payment_instructions(self, paid_party):
        instructions = build_payment_instructions(paid_party)

        assert instructions['amount'] == '10.00'
        assert instructions['recipient'] == 'host-pay'
        assert instructions['note'] == 'Formal tickets'
        assert instructions['app_url'].startswith('venmo://paycharge?txn=pay&recipients=host-pay')
        assert 'amount=10.00' in instructions['app_url']
        assert 'note=Formal%20tickets' in instructions['app_url']
        assert instructions['web_url'] == 'https://venmo.com/host-pay'

    def test_payment_instructions_default_note(self, paid_party):
        paid_party.payment_description = ''
        assert build_payment_instructions(paid_party)['note'] == 'Party payment'


# =============================================================================
# Derived View Tests
# =============================================================================

@pytest.mark.django_db
class TestPartyView:
    """Tests for party_view.py."""

    def test_is_party_over_boundaries(self, party):
        start = party.date_time

        assert is_party_over(party, now=start + timedelta(seconds=1)) is True
        assert is_party_over(party, now=start - timedelta(seconds=1)) is False
        assert is_party_over(party, now=start) is False

    def test_host_view(self, party):
        view = compose_party_view(party, party.host)

        assert view.is_host is True
        assert view.is_joined is True
        assert view.is_party_over is False

    def test_guest_view(self, party, guest_user):
        assert compose_party_view(party, guest_user).is_joined is False

        join_party(party_id=party.id, user=guest_user)
        view = compose_party_view(party, guest_user)

        assert view.is_host is False
        assert view.is_joined is True

    def test_no_viewer(self, past_party):
        view = compose_party_view(past_party, None)

        assert view.is_host is False
        assert view.is_joined is False
        assert view.is_party_over is True


# =============================================================================
# Query Fallback Tests
# =============================================================================

@pytest.mark.django_db
class TestQueryFallback:
    """Tests for query_fallback.run_with_fallback."""

    def test_primary_result_returned(self):
        assert run_with_fallback(lambda: [1], lambda: [2], 'op') == [1]

    def test_database_error_runs_fallback(self):
        def primary():
            raise OperationalError("The query requires an index. Create it here: https://console.example/idx")

        assert run_with_fallback(primary, lambda: ['scanned'], 'op') == ['scanned']

    def test_permission_denied_returns_empty(self):
        fallback_calls = []

        def primary():
            raise DatabaseError("permission denied for table parties")

        def fallback():
            fallback_calls.append(1)
            return ['scanned']

        assert run_with_fallback(primary, fallback, 'op') == []
        assert fallback_calls == []

    def test_fallback_runs_inside_open_transaction(self, party):
        def primary():
            with connection.cursor() as cursor:
                cursor.execute("SELECT missing_column FROM parties")
            return []

        def fallback():
            return list(Party.objects.filter(id=party.id))

        with transaction.atomic():
            result = run_with_fallback(primary, fallback, 'op')

            assert result == [party]
            assert transaction.get_rollback() is False
            assert Party.objects.filter(id=party.id).exists()

    def test_failing_fallback_propagates(self):
        def primary():
            raise OperationalError("missing index")

        def fallback():
            raise OperationalError("disk I/O error")

        with pytest.raises(OperationalError):
            run_with_fallback(primary, fallback, 'op')

    def test_non_database_errors_propagate(self):
        def primary():
            raise ValueError("boom")

        with pytest.raises(ValueError):
            run_with_fallback(primary, lambda: [], 'op')

    def test_list_parties_fallback_scan(self, party, other_school_user, settings):
        settings.PARTY_SCAN_LIMIT = 10
        create_party(
            host=other_school_user, title='Elsewhere', location='C',
            date_time=timezone.now() + timedelta(days=1),
        )

        real_run = run_with_fallback

        def failing_primary(primary, fallback, operation):
            def broken():
                raise OperationalError("missing index")
            return real_run(broken, fallback, operation)

        with patch('apps.parties.services.party_management.run_with_fallback', failing_primary):
            result = list_parties(university='Carleton College')

        assert result == [party]
