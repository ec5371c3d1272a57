"""
Shared error taxonomy for ʻĀina Bucks services.

Every service layer raises subclasses of ``AinaBucksServiceError``. Each
class carries a machine readable ``code`` and the HTTP ``status_code`` the
API layer answers with, so views can turn any service error into the
tagged ``{"success": false, "error": ..., "code": ...}`` envelope.

Exception Hierarchy:
    AinaBucksServiceError (base)
    ├── UnauthenticatedError
    ├── UnauthorizedError
    ├── NotFoundError
    ├── InvalidInputError
    ├── ConflictError
    └── TransactionFailureError

App specific errors (``EventFullError``, ``AlreadyAwardedError`` ...) live
in each app's ``services/exceptions.py`` and extend these classes.
"""


class AinaBucksServiceError(Exception):
    """
    Base exception for all service errors.

    Catch this in views to handle every expected, recoverable error:

        try:
            award_aina_bucks(...)
        except AinaBucksServiceError as e:
            return error_response(e)
    """

    code = 'service_error'
    status_code = 400
    default_message = 'Request could not be completed.'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class UnauthenticatedError(AinaBucksServiceError):
    """Raised when an operation requires a signed-in user."""

    code = 'unauthenticated'
    status_code = 401
    default_message = 'You must be logged in.'


class UnauthorizedError(AinaBucksServiceError):
    """Raised when the acting user lacks the required role."""

    code = 'unauthorized'
    status_code = 403
    default_message = 'Unauthorized: Admin access required'


class NotFoundError(AinaBucksServiceError):
    """Raised when a referenced record does not exist."""

    code = 'not_found'
    status_code = 404
    default_message = 'Not found.'


class InvalidInputError(AinaBucksServiceError):
    """Raised when an argument fails a business rule check."""

    code = 'invalid_input'
    status_code = 400


class ConflictError(AinaBucksServiceError):
    """Raised when the current state forbids the requested transition."""

    code = 'conflict'
    status_code = 409


class TransactionFailureError(AinaBucksServiceError):
    """
    Raised when an unexpected persistence error aborts an atomic write.

    The only error kind logged server-side with a full traceback.
    """

    code = 'transaction_failure'
    status_code = 500
    default_message = 'The operation failed. Please try again.'
