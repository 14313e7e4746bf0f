import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.parties.models import Party, PartyAttendance


def _make_user(name):
    return User.objects.create_user(
        email=f'{name}@carleton.edu',
        password='TestPass123!',
        username=name,
        university='Carleton College',
    )


@pytest.fixture
def host_user(db):
    return _make_user('host')


@pytest.fixture
def alice(db):
    return _make_user('alice')


@pytest.fixture
def bob(db):
    return _make_user('bob')


@pytest.fixture
def outsider(db):
    """A student who is not attending the party."""
    return _make_user('outsider')


@pytest.fixture
def party(host_user, alice, bob):
    """Party attended by host, alice and bob (in that order)."""
    party = Party.objects.create(
        host=host_user,
        title='Potluck',
        location='Farm House',
        date_time=timezone.now() + timedelta(days=1),
        university=host_user.university,
    )
    for user in (host_user, alice, bob):
        PartyAttendance.objects.create(party=party, user=user)
    return party


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def host_client(host_user):
    return _client_for(host_user)


@pytest.fixture
def alice_client(alice):
    return _client_for(alice)


@pytest.fixture
def outsider_client(outsider):
    return _client_for(outsider)
