"""
Registration service.

Handles signing up for events and cancelling, with the capacity check
serialized per event.
"""

import logging
from uuid import UUID

from django.db import IntegrityError, transaction

from apps.accounts.models import User
from apps.common.guards import ensure_authenticated
from apps.common.invalidation import (
    EVENT_CATALOG_KEY,
    event_detail_key,
    invalidate_views,
    profile_key,
)
from apps.events.models import Event
from apps.events.services import EventNotFoundError
from apps.registrations.models import Registration, RegistrationStatus

from .exceptions import AlreadyRegisteredError, EventFullError

logger = logging.getLogger(__name__)


@transaction.atomic
def register_for_event(*, event_id: UUID, user: User) -> Registration:
    """
    Register user for an event.

    The event row is locked for the duration of the transaction, so two
    concurrent sign-ups for the last spot are serialized: one succeeds,
    the other sees the updated count and gets EventFullError. The partial
    unique constraint on (user, event) backs the duplicate check.

    Args:
        event_id: UUID of the event
        user: User registering

    Returns:
        Created Registration instance

    Raises:
        UnauthenticatedError: If user is not signed in
        EventNotFoundError: If event doesn't exist
        AlreadyRegisteredError: If user already holds a REGISTERED row
        EventFullError: If REGISTERED count reached volunteers_needed
    """
    ensure_authenticated(user)

    try:
        event = Event.objects.select_for_update().get(id=event_id)
    except Event.DoesNotExist:
        raise EventNotFoundError(f"Event with ID {event_id} not found")

    active = Registration.objects.filter(event=event, status=RegistrationStatus.REGISTERED)

    if active.filter(user=user).exists():
        raise AlreadyRegisteredError()

    if active.count() >= event.volunteers_needed:
        raise EventFullError()

    try:
        with transaction.atomic():
            registration = Registration.objects.create(
                user=user,
                event=event,
                status=RegistrationStatus.REGISTERED,
            )
    except IntegrityError:
        # Concurrent registration by the same user
        raise AlreadyRegisteredError()

    logger.info("User %s registered for event %s", user.id, event.id)
    invalidate_views(EVENT_CATALOG_KEY, event_detail_key(event.id), profile_key(user.id))
    return registration


@transaction.atomic
def cancel_registration(*, event_id: UUID, user: User) -> int:
    """
    Cancel the user's active registration for an event.

    Cancelling without an active registration is a successful no-op.

    Returns:
        Number of registrations cancelled (0 or 1)
    """
    ensure_authenticated(user)

    cancelled = Registration.objects.filter(
        user=user,
        event_id=event_id,
        status=RegistrationStatus.REGISTERED,
    ).update(status=RegistrationStatus.CANCELLED)

    if cancelled:
        logger.info("User %s cancelled registration for event %s", user.id, event_id)
        invalidate_views(EVENT_CATALOG_KEY, event_detail_key(event_id), profile_key(user.id))

    return cancelled
