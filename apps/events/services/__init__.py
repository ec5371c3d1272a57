"""Services for events business logic."""

from .exceptions import (
    EventsServiceError,
    EventNotFoundError,
)
from .catalog import (
    get_event,
    get_event_catalog,
    get_event_detail,
    get_event_categories,
    with_registration_counts,
)
from .event_management import (
    create_event,
    update_event,
    delete_event,
)
from .qr_codes import get_event_qr_codes

__all__ = [
    # Exceptions
    'EventsServiceError',
    'EventNotFoundError',
    # Services
    'get_event',
    'get_event_catalog',
    'get_event_detail',
    'get_event_categories',
    'with_registration_counts',
    'create_event',
    'update_event',
    'delete_event',
    'get_event_qr_codes',
]
