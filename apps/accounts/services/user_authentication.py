"""User authentication service."""

from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Authenticate user with email and password.

    Pending and rejected accounts can still sign in; they are kept out of
    the volunteer features by the approval permission classes.

    Uses select_for_update() to prevent race conditions when updating last_login.

    Args:
        email: User's email
        password: User's password

    Returns:
        Authenticated User instance

    Raises:
        InvalidCredentialsError: If credentials are invalid
        InactiveAccountError: If account is deactivated
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(email__iexact=email)
        )
    except User.DoesNotExist:
        raise InvalidCredentialsError("Invalid email or password")

    if not user.check_password(password):
        raise InvalidCredentialsError("Invalid email or password")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    return user


def build_session(user) -> dict:
    """Session payload handed to clients and embedded in access tokens."""
    return {
        'user_id': str(user.id),
        'name': user.full_name,
        'email': user.email,
        'role': user.role,
        'status': user.status,
    }
