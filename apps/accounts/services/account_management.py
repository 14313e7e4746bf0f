"""Account management service."""

from django.contrib.auth import get_user_model

User = get_user_model()


def update_venmo_username(*, user: User, venmo_username: str) -> User:
    """
    Set or clear the user's payment handle.

    A leading ``@`` is dropped so ``@alex`` and ``alex`` store the same
    handle. A blank value clears it.
    """
    user.venmo_username = venmo_username.strip().lstrip('@')
    user.save(update_fields=['venmo_username'])
    return user
