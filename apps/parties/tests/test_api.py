import pytest
from datetime import timedelta
from uuid import uuid4
from django.urls import reverse
from django.utils import timezone
from rest_framework import status

from apps.parties.models import Party, PartyAttendance, PartyPayment


# =============================================================================
# Party CRUD Tests
# =============================================================================

@pytest.mark.django_db
class TestPartyCrud:
    """Tests for /api/parties/"""

    def test_list_requires_auth(self, api_client):
        response = api_client.get(reverse('parties:party-list'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_list_scoped_to_university(self, guest_client, party, other_school_user):
        Party.objects.create(
            host=other_school_user,
            title='Elsewhere',
            location='Coffman',
            date_time=timezone.now() + timedelta(days=1),
            university=other_school_user.university,
        )

        response = guest_client.get(reverse('parties:party-list'))

        assert response.status_code == status.HTTP_200_OK
        titles = [p['title'] for p in response.data['results']]
        assert titles == ['Friday Night Party']

    def test_create_party(self, host_client, host_user):
        data = {
            'title': 'Spring Bash',
            'location': 'Bald Spot',
            'date_time': (timezone.now() + timedelta(days=3)).isoformat(),
            'max_attendees': 50,
        }
        response = host_client.post(reverse('parties:party-list'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['is_host'] is True
        assert response.data['is_joined'] is True
        assert response.data['attendee_count'] == 1
        assert response.data['university'] == 'Carleton College'

    def test_create_paid_party_without_handle(self, host_client):
        data = {
            'title': 'Formal',
            'location': 'Great Hall',
            'date_time': (timezone.now() + timedelta(days=3)).isoformat(),
            'requires_payment': True,
            'payment_amount': '12.00',
        }
        response = host_client.post(reverse('parties:party-list'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_retrieve_flags_for_guest(self, guest_client, party):
        url = reverse('parties:party-detail', kwargs={'pk': party.id})
        response = guest_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['is_host'] is False
        assert response.data['is_joined'] is False
        assert response.data['is_party_over'] is False
        assert response.data['host']['username'] == 'host'

    def test_retrieve_missing(self, guest_client):
        url = reverse('parties:party-detail', kwargs={'pk': uuid4()})
        response = guest_client.get(url)
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_by_host(self, host_client, party):
        url = reverse('parties:party-detail', kwargs={'pk': party.id})
        response = host_client.patch(url, {'title': 'Renamed'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['title'] == 'Renamed'

    def test_update_by_guest_forbidden(self, guest_client, party):
        url = reverse('parties:party-detail', kwargs={'pk': party.id})
        response = guest_client.patch(url, {'title': 'Hijacked'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_delete_not_allowed(self, host_client, party):
        url = reverse('parties:party-detail', kwargs={'pk': party.id})
        response = host_client.delete(url)

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert Party.objects.filter(id=party.id).exists()


# =============================================================================
# Join / Leave Tests
# =============================================================================

@pytest.mark.django_db
class TestJoinLeave:
    """Tests for join and leave actions."""

    def test_join_then_already_joined(self, guest_client, party):
        url = reverse('parties:party-join', kwargs={'pk': party.id})

        first = guest_client.post(url)
        second = guest_client.post(url)

        assert first.status_code == status.HTTP_201_CREATED
        assert second.status_code == status.HTTP_200_OK
        assert PartyAttendance.objects.filter(party=party).count() == 2

    def test_join_missing_party(self, guest_client):
        url = reverse('parties:party-join', kwargs={'pk': uuid4()})
        response = guest_client.post(url)
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_join_full_party(self, guest_client, small_party, second_guest):
        PartyAttendance.objects.create(party=small_party, user=second_guest)

        url = reverse('parties:party-join', kwargs={'pk': small_party.id})
        response = guest_client.post(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_join_past_party(self, guest_client, past_party):
        url = reverse('parties:party-join', kwargs={'pk': past_party.id})
        response = guest_client.post(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_join_paid_party_returns_instructions(self, guest_client, paid_party, guest_user):
        url = reverse('parties:party-join', kwargs={'pk': paid_party.id})
        response = guest_client.post(url)

        assert response.status_code == status.HTTP_402_PAYMENT_REQUIRED
        assert response.data['payment']['recipient'] == 'host-pay'
        assert response.data['payment']['web_url'] == 'https://venmo.com/host-pay'
        assert response.data['payment']['amount'] == '10.00'
        assert set(response.data['payment']) == {'amount', 'recipient', 'note', 'app_url', 'web_url'}
        assert not PartyAttendance.objects.filter(party=paid_party, user=guest_user).exists()

    def test_pay_then_join(self, guest_client, paid_party):
        pay_url = reverse('parties:party-payment', kwargs={'pk': paid_party.id})

        status_before = guest_client.get(pay_url)
        submitted = guest_client.post(pay_url, {'transaction_reference': '1234'}, format='json')
        status_after = guest_client.get(pay_url)
        joined = guest_client.post(reverse('parties:party-join', kwargs={'pk': paid_party.id}))

        assert status_before.data == {'is_paid': False}
        assert submitted.status_code == status.HTTP_200_OK
        assert submitted.data['is_paid'] is True
        assert status_after.data == {'is_paid': True}
        assert joined.status_code == status.HTTP_201_CREATED

    def test_payment_on_free_party(self, guest_client, party):
        url = reverse('parties:party-payment', kwargs={'pk': party.id})
        response = guest_client.post(url, {'transaction_reference': '1234'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert not PartyPayment.objects.exists()

    def test_leave(self, guest_client, party, guest_user):
        PartyAttendance.objects.create(party=party, user=guest_user)

        url = reverse('parties:party-leave', kwargs={'pk': party.id})
        response = guest_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert not PartyAttendance.objects.filter(party=party, user=guest_user).exists()

    def test_host_cannot_leave(self, host_client, party):
        url = reverse('parties:party-leave', kwargs={'pk': party.id})
        response = host_client.post(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_attendees(self, guest_client, party):
        url = reverse('parties:party-attendees', kwargs={'pk': party.id})
        response = guest_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [a['user']['username'] for a in response.data] == ['host']


# =============================================================================
# Hosted / Joined Tests
# =============================================================================

@pytest.mark.django_db
class TestMyParties:
    """Tests for hosted and joined listings."""

    def test_hosted(self, host_client, party, past_party):
        response = host_client.get(reverse('parties:party-hosted'))

        assert response.status_code == status.HTTP_200_OK
        assert [p['title'] for p in response.data['results']] == ['Last Week', 'Friday Night Party']

    def test_joined(self, guest_client, party, guest_user):
        assert guest_client.get(reverse('parties:party-joined')).data['count'] == 0

        PartyAttendance.objects.create(party=party, user=guest_user)
        response = guest_client.get(reverse('parties:party-joined'))

        assert response.data['count'] == 1
        assert response.data['results'][0]['is_joined'] is True
