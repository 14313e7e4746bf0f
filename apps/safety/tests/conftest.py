import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.parties.models import Party, PartyAttendance


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def host_user(db):
    return User.objects.create_user(
        email='host@carleton.edu',
        password='TestPass123!',
        username='host',
        university='Carleton College',
    )


@pytest.fixture
def driver_user(db):
    """Create an attendee who volunteers to drive."""
    return User.objects.create_user(
        email='driver@carleton.edu',
        password='TestPass123!',
        username='driver',
        university='Carleton College',
    )


@pytest.fixture
def rider_user(db):
    return User.objects.create_user(
        email='rider@carleton.edu',
        password='TestPass123!',
        username='rider',
        university='Carleton College',
    )


@pytest.fixture
def party(host_user, driver_user):
    """Upcoming party attended by the host and the driver."""
    party = Party.objects.create(
        host=host_user,
        title='Safe Ride Party',
        location='Evans Hall',
        date_time=timezone.now() + timedelta(hours=6),
        university=host_user.university,
    )
    PartyAttendance.objects.create(party=party, user=host_user)
    PartyAttendance.objects.create(party=party, user=driver_user)
    return party


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def driver_client(driver_user):
    return _client_for(driver_user)


@pytest.fixture
def rider_client(rider_user):
    return _client_for(rider_user)
