"""User registration service."""

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from config.logging import get_logger

from .exceptions import UserRegistrationError
from .universities import resolve_university

User = get_user_model()

logger = get_logger(__name__)


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    username: str = ""
) -> User:
    """
    Register a new student account.

    Only .edu addresses are accepted; the university is derived from the
    email domain and stored on the user.

    Args:
        email: User's university email address
        password: User's password (will be hashed)
        username: Optional public username

    Returns:
        Created User instance

    Raises:
        NonUniversityEmailError: If the email is not a .edu address
        UserRegistrationError: If registration fails (e.g. duplicate email)
    """
    university = resolve_university(email)

    if User.objects.filter(email__iexact=email.strip()).exists():
        raise UserRegistrationError("An account with this email already exists")

    try:
        user = User.objects.create_user(
            email=email,
            password=password,
            username=username,
            university=university,
        )
    except IntegrityError:
        raise UserRegistrationError("An account with this email already exists")

    logger.info("user_registered", user_id=str(user.id), university=university)
    return user
