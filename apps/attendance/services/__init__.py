"""Services for attendance tracking and awarding ʻĀina Bucks."""

from .exceptions import (
    InvalidTokenError,
    NotRegisteredError,
    AlreadyCheckedInError,
    NotCheckedInError,
    AlreadyCheckedOutError,
    AlreadyAwardedError,
    AttendanceNotFoundError,
)
from .check_in_out import check_in, check_out, estimate_hours
from .roster import (
    get_event_attendance,
    get_attendance_summary,
    close_out_event,
)
from .award import award_aina_bucks, calculate_award, parse_hours

__all__ = [
    # Exceptions
    'InvalidTokenError',
    'NotRegisteredError',
    'AlreadyCheckedInError',
    'NotCheckedInError',
    'AlreadyCheckedOutError',
    'AlreadyAwardedError',
    'AttendanceNotFoundError',
    # Services
    'check_in',
    'check_out',
    'estimate_hours',
    'get_event_attendance',
    'get_attendance_summary',
    'close_out_event',
    'award_aina_bucks',
    'calculate_award',
    'parse_hours',
]
