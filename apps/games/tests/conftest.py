import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.parties.models import Party, PartyAttendance
from apps.games.models import Game, GameCategory


def _make_user(name, domain='carleton.edu', university='Carleton College'):
    return User.objects.create_user(
        email=f'{name}@{domain}',
        password='TestPass123!',
        username=name,
        university=university,
    )


@pytest.fixture
def host_user(db):
    return _make_user('host')


@pytest.fixture
def guest_user(db):
    return _make_user('guest')


@pytest.fixture
def outsider(db):
    return _make_user('outsider', domain='umn.edu', university='University of Minnesota')


@pytest.fixture
def party(host_user, guest_user):
    party = Party.objects.create(
        host=host_user,
        title='Game Night',
        location='Burton Lounge',
        date_time=timezone.now() + timedelta(hours=4),
        university=host_user.university,
    )
    for user in (host_user, guest_user):
        PartyAttendance.objects.create(party=party, user=user)
    return party


@pytest.fixture
def beer_pong(db):
    return Game.objects.create(
        name='Beer Pong',
        category=GameCategory.DRINKING,
        universities=['Carleton College', 'University of Minnesota'],
        popularity=10,
        is_public=True,
    )


@pytest.fixture
def secret_hitler(db):
    return Game.objects.create(
        name='Secret Hitler',
        category=GameCategory.CARD,
        universities=['Carleton College'],
        popularity=3,
        is_public=False,
    )


@pytest.fixture
def api_client():
    return APIClient()


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def host_client(host_user):
    return _client_for(host_user)


@pytest.fixture
def guest_client(guest_user):
    return _client_for(guest_user)


@pytest.fixture
def outsider_client(outsider):
    return _client_for(outsider)
