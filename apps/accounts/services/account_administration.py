"""
Account administration service.

Admin-only operations on user accounts: reviewing sign-up requests,
changing roles and statuses, deleting accounts.
"""

import logging
from uuid import UUID

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import AccountStatus, Role
from apps.common.exceptions import InvalidInputError
from apps.common.guards import admin_required
from apps.common.invalidation import (
    EVENT_CATALOG_KEY,
    event_detail_key,
    invalidate_views,
    profile_key,
)
from apps.registrations.models import RegistrationStatus

from .exceptions import AccountAlreadyReviewedError, UserNotFoundError

logger = logging.getLogger(__name__)

User = get_user_model()


def _get_locked_user(user_id) -> User:
    try:
        return User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User with ID {user_id} not found")


def _review_account(user_id, decision, actor) -> User:
    user = _get_locked_user(user_id)

    # An account request is reviewed once
    if user.status != AccountStatus.PENDING:
        raise AccountAlreadyReviewedError(
            f"Account has already been {user.get_status_display().lower()}"
        )

    user.status = decision
    user.save(update_fields=['status'])

    logger.info("Account %s %s by %s", user.id, decision, actor.id)
    invalidate_views(profile_key(user.id))
    return user


@admin_required
@transaction.atomic
def approve_account(*, user_id: UUID, actor: User) -> User:
    """
    Approve a pending account request.

    Raises:
        UnauthorizedError: If actor is not an approved admin
        UserNotFoundError: If the user doesn't exist
        AccountAlreadyReviewedError: If the account is not pending
    """
    return _review_account(user_id, AccountStatus.APPROVED, actor)


@admin_required
@transaction.atomic
def reject_account(*, user_id: UUID, actor: User) -> User:
    """
    Reject a pending account request.

    Raises:
        UnauthorizedError: If actor is not an approved admin
        UserNotFoundError: If the user doesn't exist
        AccountAlreadyReviewedError: If the account is not pending
    """
    return _review_account(user_id, AccountStatus.REJECTED, actor)


@admin_required
@transaction.atomic
def update_user_role(*, user_id: UUID, role: str, actor: User) -> User:
    """Switch a user between USER and ADMIN."""
    if role not in Role.values:
        raise InvalidInputError("Invalid role. Must be USER or ADMIN.")

    user = _get_locked_user(user_id)
    user.role = role
    user.save(update_fields=['role'])

    logger.info("Role of %s set to %s by %s", user.id, role, actor.id)
    invalidate_views(profile_key(user.id))
    return user


@admin_required
@transaction.atomic
def update_user_status(*, user_id: UUID, status: str, actor: User) -> User:
    """Set any approval status, including reopening a reviewed account."""
    if status not in AccountStatus.values:
        raise InvalidInputError("Invalid status.")

    user = _get_locked_user(user_id)
    user.status = status
    user.save(update_fields=['status'])

    logger.info("Status of %s set to %s by %s", user.id, status, actor.id)
    invalidate_views(profile_key(user.id))
    return user


@admin_required
@transaction.atomic
def delete_user(*, user_id: UUID, actor: User) -> None:
    """
    Hard-delete a user.

    Registrations, attendance and ledger entries of the user cascade.
    """
    user = _get_locked_user(user_id)
    registered_event_ids = list(
        user.registrations
        .filter(status=RegistrationStatus.REGISTERED)
        .values_list('event_id', flat=True)
    )
    user.delete()
    logger.info("User %s deleted by %s", user_id, actor.id)

    keys = [profile_key(user_id)]
    if registered_event_ids:
        # Cascaded registrations change the cached head counts
        keys.append(EVENT_CATALOG_KEY)
        keys.extend(event_detail_key(event_id) for event_id in registered_event_ids)
    invalidate_views(*keys)


def get_all_users() -> QuerySet[User]:
    return User.objects.order_by('-created_at')


def get_pending_users() -> QuerySet[User]:
    return User.objects.filter(status=AccountStatus.PENDING).order_by('created_at')
