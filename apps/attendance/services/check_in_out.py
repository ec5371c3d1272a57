"""
QR check-in and check-out.

Volunteers scan the event's check-in or check-out QR code, which carries
the event id and its token. The token is verified before any registration
or attendance state is looked at.
"""

import logging
import secrets
from decimal import Decimal
from uuid import UUID

from django.db import IntegrityError, transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.attendance.models import Attendance, AttendanceStatus
from apps.common.guards import ensure_authenticated
from apps.events.models import Event
from apps.events.services import EventNotFoundError
from apps.registrations.models import Registration, RegistrationStatus

from .exceptions import (
    AlreadyCheckedInError,
    AlreadyCheckedOutError,
    InvalidTokenError,
    NotCheckedInError,
    NotRegisteredError,
)

logger = logging.getLogger(__name__)


def _get_event(event_id) -> Event:
    try:
        return Event.objects.get(id=event_id)
    except Event.DoesNotExist:
        raise EventNotFoundError(f"Event with ID {event_id} not found")


def _verify_token(presented, expected) -> None:
    if not presented or not secrets.compare_digest(str(presented), str(expected)):
        raise InvalidTokenError()


def estimate_hours(check_in_time, check_out_time) -> Decimal:
    """Elapsed hours rounded to one decimal. Display only, never awarded."""
    seconds = (check_out_time - check_in_time).total_seconds()
    return Decimal(str(round(seconds / 3600, 1)))


@transaction.atomic
def check_in(*, event_id: UUID, token: str, user: User) -> Attendance:
    """
    Check a registered volunteer in to an event.

    Raises:
        UnauthenticatedError: If user is not signed in
        EventNotFoundError: If event doesn't exist
        InvalidTokenError: If token isn't the event's check-in token
        NotRegisteredError: If user has no active registration
        AlreadyCheckedInError: If an attendance record already exists
    """
    ensure_authenticated(user)
    event = _get_event(event_id)
    _verify_token(token, event.check_in_token)

    registration = Registration.objects.filter(
        user=user,
        event=event,
        status=RegistrationStatus.REGISTERED,
    ).first()
    if registration is None:
        raise NotRegisteredError()

    if Attendance.objects.filter(user=user, event=event).exists():
        raise AlreadyCheckedInError()

    try:
        with transaction.atomic():
            attendance = Attendance.objects.create(
                user=user,
                event=event,
                registration=registration,
                check_in_time=timezone.now(),
                status=AttendanceStatus.CHECKED_IN,
            )
    except IntegrityError:
        # Double scan racing with itself
        raise AlreadyCheckedInError()

    logger.info("User %s checked in to event %s", user.id, event.id)
    return attendance


@transaction.atomic
def check_out(*, event_id: UUID, token: str, user: User) -> dict:
    """
    Check a volunteer out of an event.

    Returns:
        Dict with 'attendance', 'check_in_time', 'check_out_time' and
        'hours_estimate' (rounded to 0.1 h, informational)

    Raises:
        UnauthenticatedError: If user is not signed in
        EventNotFoundError: If event doesn't exist
        InvalidTokenError: If token isn't the event's check-out token
        NotCheckedInError: If there is no attendance record
        AlreadyCheckedOutError: If already checked out
    """
    ensure_authenticated(user)
    event = _get_event(event_id)
    _verify_token(token, event.check_out_token)

    attendance = (
        Attendance.objects
        .select_for_update()
        .filter(user=user, event=event)
        .first()
    )
    if attendance is None:
        raise NotCheckedInError()
    if attendance.check_out_time is not None:
        raise AlreadyCheckedOutError()

    attendance.check_out_time = timezone.now()
    attendance.status = AttendanceStatus.CHECKED_OUT
    attendance.save(update_fields=['check_out_time', 'status', 'updated_at'])

    logger.info("User %s checked out of event %s", user.id, event.id)
    return {
        'attendance': attendance,
        'check_in_time': attendance.check_in_time,
        'check_out_time': attendance.check_out_time,
        'hours_estimate': estimate_hours(attendance.check_in_time, attendance.check_out_time),
    }
