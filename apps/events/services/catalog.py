"""
Event catalog reads.

Catalog entries carry ``volunteers_registered``, the live count of
REGISTERED rows. The unfiltered catalog and each event detail are served
from the view cache and invalidated by the services that change them.
"""

from typing import Optional
from uuid import UUID

from django.db.models import Count, Q, QuerySet

from apps.common.invalidation import (
    EVENT_CATALOG_KEY,
    cached_view,
    event_detail_key,
)
from apps.events.models import Event
from apps.registrations.models import RegistrationStatus

from .exceptions import EventNotFoundError


def with_registration_counts(queryset: QuerySet) -> QuerySet:
    return queryset.annotate(
        volunteers_registered=Count(
            'registrations',
            filter=Q(registrations__status=RegistrationStatus.REGISTERED),
        )
    )


def get_event(event_id: UUID) -> Event:
    try:
        return Event.objects.get(id=event_id)
    except Event.DoesNotExist:
        raise EventNotFoundError(f"Event with ID {event_id} not found")


def get_event_catalog(
    *,
    search: Optional[str] = None,
    category: Optional[str] = None
) -> list:
    """
    List events ordered by date, with live registration counts.

    Args:
        search: Case-insensitive match on title, description, location or city
        category: Exact (case-insensitive) category

    Returns:
        List of Event instances annotated with ``volunteers_registered``
    """
    if not search and not category:
        return cached_view(EVENT_CATALOG_KEY, _build_catalog)

    queryset = with_registration_counts(Event.objects.all())

    if search:
        queryset = queryset.filter(
            Q(title__icontains=search)
            | Q(description__icontains=search)
            | Q(location_name__icontains=search)
            | Q(city__icontains=search)
        )
    if category:
        queryset = queryset.filter(category__iexact=category)

    return list(queryset.order_by('date', 'start_time'))


def _build_catalog() -> list:
    return list(
        with_registration_counts(Event.objects.all()).order_by('date', 'start_time')
    )


def get_event_detail(event_id: UUID) -> Event:
    """
    Single event with its registration count.

    Raises:
        EventNotFoundError: If event doesn't exist
    """
    return cached_view(event_detail_key(event_id), lambda: _build_detail(event_id))


def _build_detail(event_id) -> Event:
    event = with_registration_counts(Event.objects.filter(id=event_id)).first()
    if event is None:
        raise EventNotFoundError(f"Event with ID {event_id} not found")
    return event


def get_event_categories() -> list:
    return list(
        Event.objects.order_by('category').values_list('category', flat=True).distinct()
    )
