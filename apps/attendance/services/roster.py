"""Admin views of an event's attendance, and closing an event out."""

import logging
from uuid import UUID

from django.db import transaction
from django.db.models import Count, Q, QuerySet

from apps.accounts.models import User
from apps.attendance.models import Attendance, AttendanceStatus
from apps.common.guards import admin_required
from apps.events.models import Event
from apps.events.services import EventNotFoundError
from apps.registrations.models import Registration, RegistrationStatus
from apps.registrations.services import mark_no_shows

logger = logging.getLogger(__name__)


def get_event_attendance(event_id: UUID) -> QuerySet[Attendance]:
    """Attendance records of an event with user, registration and award entry."""
    if not Event.objects.filter(id=event_id).exists():
        raise EventNotFoundError(f"Event with ID {event_id} not found")

    return (
        Attendance.objects
        .filter(event_id=event_id)
        .select_related('user', 'event', 'registration', 'award_transaction')
        .order_by('check_in_time')
    )


def get_attendance_summary(event_id: UUID) -> dict:
    """Head counts for an event."""
    if not Event.objects.filter(id=event_id).exists():
        raise EventNotFoundError(f"Event with ID {event_id} not found")

    registrations = Registration.objects.filter(event_id=event_id).aggregate(
        registered=Count('id', filter=Q(status__in=[
            RegistrationStatus.REGISTERED,
            RegistrationStatus.ATTENDED,
        ])),
        no_show=Count('id', filter=Q(status=RegistrationStatus.NO_SHOW)),
    )
    attendance = Attendance.objects.filter(event_id=event_id).aggregate(
        checked_in=Count('id'),
        checked_out=Count('id', filter=Q(check_out_time__isnull=False)),
        incomplete=Count('id', filter=Q(status=AttendanceStatus.INCOMPLETE)),
        awarded=Count('id', filter=Q(awarded=True)),
    )

    return {'event_id': str(event_id), **registrations, **attendance}


@admin_required
@transaction.atomic
def close_out_event(*, event_id: UUID, actor: User) -> dict:
    """
    Close an event after it ends.

    Volunteers who checked in but never checked out become INCOMPLETE and
    registered volunteers who never checked in become NO_SHOW. Awarding
    stays possible for INCOMPLETE records.

    Returns:
        {'incomplete': int, 'no_shows': int}
    """
    try:
        Event.objects.select_for_update().only('id').get(id=event_id)
    except Event.DoesNotExist:
        raise EventNotFoundError(f"Event with ID {event_id} not found")

    incomplete = Attendance.objects.filter(
        event_id=event_id,
        status=AttendanceStatus.CHECKED_IN,
        check_out_time__isnull=True,
    ).update(status=AttendanceStatus.INCOMPLETE)

    no_shows = mark_no_shows(event_id=event_id, actor=actor)

    logger.info(
        "Closed out event %s by %s: %d incomplete, %d no-show(s)",
        event_id, actor.id, incomplete, no_shows,
    )
    return {'incomplete': incomplete, 'no_shows': no_shows}
