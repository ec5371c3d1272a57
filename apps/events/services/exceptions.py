"""Domain-specific exceptions for events services."""

from apps.common.exceptions import AinaBucksServiceError, NotFoundError


class EventsServiceError(AinaBucksServiceError):
    """Base exception for events services."""
    code = 'events_error'


class EventNotFoundError(NotFoundError):
    """Raised when event does not exist."""
    default_message = 'Event not found.'
