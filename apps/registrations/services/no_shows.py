"""Closing registrations of volunteers who never showed up."""

import logging
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.attendance.models import Attendance
from apps.common.guards import admin_required
from apps.common.invalidation import (
    EVENT_CATALOG_KEY,
    event_detail_key,
    invalidate_views,
    profile_key,
)
from apps.events.models import Event
from apps.events.services import EventNotFoundError
from apps.registrations.models import Registration, RegistrationStatus

logger = logging.getLogger(__name__)


@admin_required
@transaction.atomic
def mark_no_shows(*, event_id: UUID, actor: User) -> int:
    """
    Mark REGISTERED volunteers without an attendance record as NO_SHOW.

    Returns:
        Number of registrations marked
    """
    try:
        Event.objects.select_for_update().only('id').get(id=event_id)
    except Event.DoesNotExist:
        raise EventNotFoundError(f"Event with ID {event_id} not found")

    attended = Attendance.objects.filter(event_id=event_id).values('user_id')
    no_shows = Registration.objects.filter(
        event_id=event_id,
        status=RegistrationStatus.REGISTERED,
    ).exclude(user_id__in=attended)
    user_ids = list(no_shows.values_list('user_id', flat=True))

    marked = no_shows.update(status=RegistrationStatus.NO_SHOW)

    if marked:
        logger.info("Marked %d no-show(s) for event %s by %s", marked, event_id, actor.id)
        invalidate_views(
            EVENT_CATALOG_KEY,
            event_detail_key(event_id),
            *[profile_key(user_id) for user_id in user_ids],
        )

    return marked
