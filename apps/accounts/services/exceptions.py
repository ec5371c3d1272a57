"""Domain-specific exceptions for accounts services."""

from apps.common.exceptions import (
    AinaBucksServiceError,
    ConflictError,
    NotFoundError,
)


class AccountsServiceError(AinaBucksServiceError):
    """Base exception for accounts services."""
    code = 'accounts_error'


class RegistrationFailedError(AccountsServiceError):
    """Raised when sign-up fails."""
    code = 'registration_failed'
    default_message = 'Registration failed.'


class InvalidCredentialsError(AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    code = 'invalid_credentials'
    status_code = 401
    default_message = 'Invalid email or password'


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    code = 'inactive_account'
    status_code = 403
    default_message = 'Account is deactivated'


class UserNotFoundError(NotFoundError):
    """Raised when user does not exist."""
    default_message = 'User not found.'


class AccountAlreadyReviewedError(ConflictError):
    """Raised when approving or rejecting an account that is no longer pending."""
    code = 'account_already_reviewed'
