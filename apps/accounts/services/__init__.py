"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    RegistrationFailedError,
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
    AccountAlreadyReviewedError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user, build_session
from .account_administration import (
    approve_account,
    reject_account,
    update_user_role,
    update_user_status,
    delete_user,
    get_all_users,
    get_pending_users,
)
from .profile import get_profile_summary

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'RegistrationFailedError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'UserNotFoundError',
    'AccountAlreadyReviewedError',
    # Services
    'register_user',
    'authenticate_user',
    'build_session',
    'approve_account',
    'reject_account',
    'update_user_role',
    'update_user_status',
    'delete_user',
    'get_all_users',
    'get_pending_users',
    'get_profile_summary',
]
