"""Read-only registration queries."""

from uuid import UUID

from django.db.models import QuerySet

from apps.registrations.models import Registration, RegistrationStatus


def get_user_upcoming_events(user_id: UUID) -> QuerySet[Registration]:
    """Active registrations of a user, soonest event first."""
    return (
        Registration.objects
        .filter(user_id=user_id, status=RegistrationStatus.REGISTERED)
        .select_related('event')
        .order_by('event__date', 'event__start_time')
    )


def is_user_registered(user_id: UUID, event_id: UUID) -> bool:
    return Registration.objects.filter(
        user_id=user_id,
        event_id=event_id,
        status=RegistrationStatus.REGISTERED,
    ).exists()


def get_event_registrations(event_id: UUID) -> QuerySet[Registration]:
    """Roster of active registrations, in sign-up order."""
    return (
        Registration.objects
        .filter(event_id=event_id, status=RegistrationStatus.REGISTERED)
        .select_related('user')
        .order_by('registered_at')
    )
