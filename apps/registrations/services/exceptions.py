"""Domain-specific exceptions for registrations services."""

from apps.common.exceptions import ConflictError


class AlreadyRegisteredError(ConflictError):
    """Raised when the user already holds an active registration."""
    code = 'already_registered'
    default_message = 'You are already registered for this event'


class EventFullError(ConflictError):
    """Raised when the event has no spots left."""
    code = 'event_full'
    default_message = 'This event is full. No spots remaining.'
