import pytest
from datetime import timedelta
from decimal import Decimal
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
    """Create and return a party host."""
    return User.objects.create_user(
        email='host@carleton.edu',
        password='TestPass123!',
        username='host',
        university='Carleton College',
        venmo_username='host-pay',
    )


@pytest.fixture
def guest_user(db):
    """Create and return a student who joins parties."""
    return User.objects.create_user(
        email='guest@carleton.edu',
        password='TestPass123!',
        username='guest',
        university='Carleton College',
    )


@pytest.fixture
def second_guest(db):
    """Create and return another student."""
    return User.objects.create_user(
        email='guest2@carleton.edu',
        password='TestPass123!',
        username='guest2',
        university='Carleton College',
    )


@pytest.fixture
def other_school_user(db):
    """Create and return a student at a different university."""
    return User.objects.create_user(
        email='student@umn.edu',
        password='TestPass123!',
        username='gopher',
        university='University of Minnesota',
    )


def _make_party(host, **overrides):
    fields = {
        'title': 'Friday Night Party',
        'description': 'Bring snacks',
        'location': 'Goodsell Observatory',
        'date_time': timezone.now() + timedelta(days=2),
        'university': host.university,
    }
    fields.update(overrides)
    party = Party.objects.create(host=host, **fields)
    PartyAttendance.objects.create(party=party, user=host)
    return party


@pytest.fixture
def party(host_user):
    """Create an upcoming free party with the host attending."""
    return _make_party(host_user)


@pytest.fixture
def small_party(host_user):
    """Create a party with room for the host plus one guest."""
    return _make_party(host_user, title='Small Gathering', max_attendees=2)


@pytest.fixture
def paid_party(host_user):
    """Create a party that requires a Venmo payment."""
    return _make_party(
        host_user,
        title='Formal',
        requires_payment=True,
        payment_amount=Decimal('10.00'),
        venmo_username='host-pay',
        payment_description='Formal tickets',
    )


@pytest.fixture
def past_party(host_user):
    """Create a party that already happened."""
    return _make_party(
        host_user,
        title='Last Week',
        date_time=timezone.now() - timedelta(days=7),
    )


@pytest.fixture
def host_client(api_client, host_user):
    """Return an API client authenticated as the host."""
    refresh = RefreshToken.for_user(host_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def guest_client(guest_user):
    """Return an API client authenticated as the guest."""
    client = APIClient()
    refresh = RefreshToken.for_user(guest_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client
