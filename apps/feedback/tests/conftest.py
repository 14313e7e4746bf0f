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
def guest_user(db):
    return _make_user('guest')


@pytest.fixture
def second_guest(db):
    return _make_user('guest2')


@pytest.fixture
def outsider(db):
    return _make_user('outsider')


def _party(host, guests, when, title):
    party = Party.objects.create(
        host=host,
        title=title,
        location='Lyman Lakes',
        date_time=when,
        university=host.university,
    )
    for user in [host, *guests]:
        PartyAttendance.objects.create(party=party, user=user)
    return party


@pytest.fixture
def past_party(host_user, guest_user, second_guest):
    """Party that already happened, attended by both guests."""
    return _party(host_user, [guest_user, second_guest], timezone.now() - timedelta(days=1), 'Last Night')


@pytest.fixture
def future_party(host_user, guest_user):
    return _party(host_user, [guest_user], timezone.now() + timedelta(days=1), 'Tomorrow')


@pytest.fixture
def guest_client(guest_user):
    client = APIClient()
    refresh = RefreshToken.for_user(guest_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def host_client(host_user):
    client = APIClient()
    refresh = RefreshToken.for_user(host_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client
