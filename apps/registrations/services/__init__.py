"""Services for registrations business logic."""

from .exceptions import (
    AlreadyRegisteredError,
    EventFullError,
)
from .registration import (
    register_for_event,
    cancel_registration,
)
from .queries import (
    get_user_upcoming_events,
    is_user_registered,
    get_event_registrations,
)
from .no_shows import mark_no_shows

__all__ = [
    # Exceptions
    'AlreadyRegisteredError',
    'EventFullError',
    # Services
    'register_for_event',
    'cancel_registration',
    'get_user_upcoming_events',
    'is_user_registered',
    'get_event_registrations',
    'mark_no_shows',
]
