"""Domain-specific exceptions for attendance services."""

from apps.common.exceptions import AinaBucksServiceError, ConflictError, NotFoundError


class InvalidTokenError(AinaBucksServiceError):
    """Raised when a scanned QR token does not belong to the event."""
    code = 'invalid_token'
    status_code = 400
    default_message = 'Invalid QR code for this event.'


class NotRegisteredError(AinaBucksServiceError):
    """Raised when checking in without an active registration."""
    code = 'not_registered'
    status_code = 400
    default_message = 'You are not registered for this event.'


class AlreadyCheckedInError(ConflictError):
    code = 'already_checked_in'
    default_message = 'You have already checked in to this event.'


class NotCheckedInError(AinaBucksServiceError):
    code = 'not_checked_in'
    status_code = 400
    default_message = 'You have not checked in to this event.'


class AlreadyCheckedOutError(ConflictError):
    code = 'already_checked_out'
    default_message = 'You have already checked out of this event.'


class AlreadyAwardedError(ConflictError):
    """Raised when ʻĀina Bucks were already awarded for an attendance."""
    code = 'already_awarded'
    default_message = 'ʻĀina Bucks have already been awarded for this attendance.'


class AttendanceNotFoundError(NotFoundError):
    default_message = 'Attendance record not found.'
