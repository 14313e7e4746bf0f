"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    NonUniversityEmailError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
)
from .universities import UNIVERSITY_DOMAINS, resolve_university
from .user_registration import register_user
from .user_authentication import authenticate_user
from .account_management import update_venmo_username

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'NonUniversityEmailError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UserNotFoundError',
    # Services
    'UNIVERSITY_DOMAINS',
    'resolve_university',
    'register_user',
    'authenticate_user',
    'update_venmo_username',
]
