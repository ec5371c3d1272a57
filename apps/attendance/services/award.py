"""
Award engine.

Turns an admin-approved number of hours into ʻĀina Bucks:

    amount = round_half_up(hours * event.bucks_per_hour)

and records it everywhere at once: the attendance row, an EARNED ledger
entry, the user's aggregates and the registration. Either all of it is
written or none of it.
"""

import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from uuid import UUID

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import F
from django.utils import timezone

from apps.accounts.models import User
from apps.attendance.models import Attendance, AttendanceStatus
from apps.common.exceptions import InvalidInputError, TransactionFailureError
from apps.common.guards import admin_required
from apps.common.invalidation import (
    EVENT_CATALOG_KEY,
    event_detail_key,
    invalidate_views,
    profile_key,
)
from apps.ledger.models import AinaBucksTransaction, TransactionType
from apps.registrations.models import Registration, RegistrationStatus

from .exceptions import AlreadyAwardedError, AttendanceNotFoundError

logger = logging.getLogger(__name__)

MAX_HOURS = Decimal('99.99')
HOURS_PRECISION = Decimal('0.01')


def parse_hours(value) -> Decimal:
    """Validate awarded hours: a number with 0 < hours <= 99.99."""
    try:
        hours = Decimal(str(value)).quantize(HOURS_PRECISION, rounding=ROUND_HALF_UP)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidInputError("Hours worked must be a number.")

    if not hours.is_finite() or hours <= 0 or hours > MAX_HOURS:
        raise InvalidInputError(f"Hours worked must be greater than 0 and at most {MAX_HOURS}.")
    return hours


def calculate_award(hours: Decimal, bucks_per_hour: int) -> int:
    """Half-up rounding: 37.5 -> 38, 36.5 -> 37."""
    return int((hours * bucks_per_hour).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def _format_hours(hours: Decimal) -> str:
    return '{:f}'.format(hours.normalize())


@admin_required
def award_aina_bucks(
    *,
    attendance_id: UUID,
    hours_worked,
    actor: User,
    admin_notes: str = ''
) -> dict:
    """
    Award ʻĀina Bucks for an attendance record.

    The attendance row is locked for the whole transaction, so two admins
    awarding the same record at once produce exactly one award; the loser
    gets AlreadyAwardedError.

    Args:
        attendance_id: Attendance to award
        hours_worked: Approved hours, 0 < hours <= 99.99
        actor: Approving admin
        admin_notes: Optional note stored on the attendance

    Returns:
        {'aina_bucks': int, 'hours_worked': Decimal}

    Raises:
        UnauthorizedError: If actor is not an approved admin
        InvalidInputError: If hours are out of range
        AttendanceNotFoundError: If attendance doesn't exist
        AlreadyAwardedError: If the attendance was already awarded
        TransactionFailureError: If the database write fails
    """
    hours = parse_hours(hours_worked)

    try:
        with transaction.atomic():
            try:
                attendance = Attendance.objects.select_for_update().get(id=attendance_id)
            except Attendance.DoesNotExist:
                raise AttendanceNotFoundError(f"Attendance with ID {attendance_id} not found")

            if attendance.awarded:
                raise AlreadyAwardedError()

            event = attendance.event
            amount = calculate_award(hours, event.bucks_per_hour)

            attendance.hours_worked = hours
            attendance.status = AttendanceStatus.CHECKED_OUT
            attendance.admin_notes = admin_notes or ''
            attendance.awarded = True
            attendance.awarded_at = timezone.now()
            attendance.awarded_by = actor
            attendance.save(update_fields=[
                'hours_worked',
                'status',
                'admin_notes',
                'awarded',
                'awarded_at',
                'awarded_by',
                'updated_at',
            ])

            AinaBucksTransaction.objects.create(
                user_id=attendance.user_id,
                event=event,
                attendance=attendance,
                type=TransactionType.EARNED,
                amount=amount,
                hours_worked=hours,
                description=(
                    f'Earned {amount} ʻĀina Bucks for {_format_hours(hours)} hours at "{event.title}"'
                ),
                approved_by=actor,
            )

            User.objects.filter(id=attendance.user_id).update(
                total_aina_bucks_earned=F('total_aina_bucks_earned') + amount,
                current_aina_bucks=F('current_aina_bucks') + amount,
                total_hours_volunteered=F('total_hours_volunteered') + hours,
            )

            Registration.objects.filter(id=attendance.registration_id).update(
                status=RegistrationStatus.ATTENDED
            )
    except IntegrityError as e:
        # Ledger already holds an entry for this attendance
        raise AlreadyAwardedError() from e
    except DatabaseError as e:
        logger.exception("Award for attendance %s failed", attendance_id)
        raise TransactionFailureError() from e

    logger.info(
        "Awarded %d ʻĀina Bucks (%s h) to user %s for event %s, approved by %s",
        amount, hours, attendance.user_id, event.id, actor.id,
    )
    invalidate_views(
        EVENT_CATALOG_KEY,
        event_detail_key(event.id),
        profile_key(attendance.user_id),
    )
    return {'aina_bucks': amount, 'hours_worked': hours}
