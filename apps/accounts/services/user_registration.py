"""User sign-up service."""

import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from .exceptions import RegistrationFailedError

logger = logging.getLogger(__name__)

User = get_user_model()


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    full_name: str
) -> User:
    """
    Register a new volunteer account.

    New accounts start as USER with PENDING status and cannot use the
    volunteer features until an administrator approves them.

    Args:
        email: User's email address
        password: User's password (will be hashed)
        full_name: User's full name

    Returns:
        Created User instance

    Raises:
        RegistrationFailedError: If the email is already taken
    """
    email = User.objects.normalize_email(email)

    if User.objects.filter(email__iexact=email).exists():
        raise RegistrationFailedError("User already exists")

    try:
        user = User.objects.create_user(
            email=email,
            password=password,
            full_name=full_name,
        )
    except IntegrityError:
        # Concurrent sign-up with the same email
        raise RegistrationFailedError("User already exists")

    logger.info("New account %s awaiting approval", user.id)
    return user
