import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test student."""
    return User.objects.create_user(
        email='testuser@carleton.edu',
        password='TestPass123!',
        username='testuser',
        university='Carleton College',
    )


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        email='inactive@carleton.edu',
        password='TestPass123!',
        university='Carleton College',
        is_active=False,
    )


@pytest.fixture
def other_user(db):
    """Create and return another student at a different school."""
    return User.objects.create_user(
        email='otheruser@umn.edu',
        password='OtherPass123!',
        username='otheruser',
        university='University of Minnesota',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
