import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.parties.models import Party, PartyAttendance
from apps.playlists.models import Playlist


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
def dj_user(db):
    """Attendee who creates the playlist."""
    return _make_user('dj')


@pytest.fixture
def guest_user(db):
    return _make_user('guest')


@pytest.fixture
def outsider(db):
    return _make_user('outsider')


@pytest.fixture
def party(host_user, dj_user, guest_user):
    party = Party.objects.create(
        host=host_user,
        title='Dance Party',
        location='Cowling Gym',
        date_time=timezone.now() + timedelta(hours=3),
        university=host_user.university,
    )
    for user in (host_user, dj_user, guest_user):
        PartyAttendance.objects.create(party=party, user=user)
    return party


@pytest.fixture
def playlist(party, dj_user):
    return Playlist.objects.create(party=party, creator=dj_user, name='Bangers')


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def guest_client(guest_user):
    return _client_for(guest_user)


@pytest.fixture
def dj_client(dj_user):
    return _client_for(dj_user)


@pytest.fixture
def outsider_client(outsider):
    return _client_for(outsider)
