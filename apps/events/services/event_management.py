"""
Event management service (admin only).

Every write invalidates the catalog, the event detail and the profiles of
volunteers registered for the event, since their upcoming events list
shows the event's title, date and location.
"""

import logging
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction

from apps.accounts.models import User
from apps.common.exceptions import InvalidInputError
from apps.common.guards import admin_required
from apps.common.invalidation import (
    EVENT_CATALOG_KEY,
    event_detail_key,
    invalidate_views,
    profile_key,
)
from apps.events.models import Event
from apps.registrations.models import Registration, RegistrationStatus

from .exceptions import EventNotFoundError

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset({
    'title',
    'category',
    'description',
    'image_url',
    'date',
    'start_time',
    'end_time',
    'location_name',
    'address',
    'city',
    'state',
    'zip_code',
    'volunteers_needed',
    'duration',
    'aina_bucks',
    'bucks_per_hour',
    'what_to_bring',
    'requirements',
    'coordinator_name',
    'coordinator_email',
    'coordinator_phone',
})


def _validate(event: Event) -> None:
    try:
        event.full_clean(exclude=['created_by'])
    except ValidationError as e:
        raise InvalidInputError(
            '; '.join(f"{field}: {' '.join(errors)}" for field, errors in e.message_dict.items())
        )


def _invalidate_event(event_id) -> None:
    registrant_ids = Registration.objects.filter(
        event_id=event_id,
        status=RegistrationStatus.REGISTERED,
    ).values_list('user_id', flat=True)

    invalidate_views(
        EVENT_CATALOG_KEY,
        event_detail_key(event_id),
        *[profile_key(user_id) for user_id in registrant_ids],
    )


@admin_required
@transaction.atomic
def create_event(*, actor: User, **fields) -> Event:
    """
    Create an event. Check-in and check-out tokens are generated here.

    Raises:
        UnauthorizedError: If actor is not an approved admin
        InvalidInputError: If a field is unknown or fails validation
    """
    unknown = set(fields) - EDITABLE_FIELDS
    if unknown:
        raise InvalidInputError(f"Unknown event fields: {', '.join(sorted(unknown))}")

    event = Event(created_by=actor, **fields)
    _validate(event)
    event.save()

    logger.info("Event %s created by %s", event.id, actor.id)
    invalidate_views(EVENT_CATALOG_KEY)
    return event


@admin_required
@transaction.atomic
def update_event(*, event_id: UUID, actor: User, **changes) -> Event:
    """
    Apply ``changes`` to an event. Tokens and ownership are not editable.

    Raises:
        UnauthorizedError: If actor is not an approved admin
        EventNotFoundError: If event doesn't exist
        InvalidInputError: If a field is not editable or fails validation
    """
    not_editable = set(changes) - EDITABLE_FIELDS
    if not_editable:
        raise InvalidInputError(f"Fields cannot be changed: {', '.join(sorted(not_editable))}")

    try:
        event = Event.objects.select_for_update().get(id=event_id)
    except Event.DoesNotExist:
        raise EventNotFoundError(f"Event with ID {event_id} not found")

    for field, value in changes.items():
        setattr(event, field, value)
    _validate(event)
    event.save()

    logger.info("Event %s updated by %s", event.id, actor.id)
    _invalidate_event(event.id)
    return event


@admin_required
@transaction.atomic
def delete_event(*, event_id: UUID, actor: User) -> None:
    """
    Delete an event with its registrations and attendance.

    Ledger entries keep their amounts, their event reference is cleared.
    """
    try:
        event = Event.objects.select_for_update().get(id=event_id)
    except Event.DoesNotExist:
        raise EventNotFoundError(f"Event with ID {event_id} not found")

    _invalidate_event(event.id)
    event.delete()
    logger.info("Event %s deleted by %s", event_id, actor.id)
