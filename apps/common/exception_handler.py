"""
DRF exception handler that wraps framework errors (validation, auth,
throttling, 404) in the same tagged envelope as service errors.
"""

from django.core.exceptions import PermissionDenied
from django.http import Http404
from rest_framework.views import exception_handler

from .exceptions import AinaBucksServiceError
from .responses import error_response


def tagged_exception_handler(exc, context):
    if isinstance(exc, AinaBucksServiceError):
        return error_response(exc)

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, Http404):
        code = 'not_found'
    elif isinstance(exc, PermissionDenied):
        code = 'permission_denied'
    else:
        code = getattr(exc, 'default_code', 'error')

    details = response.data
    if isinstance(details, dict) and 'detail' in details:
        message = str(details['detail'])
    else:
        message = 'Invalid input.'

    response.data = {
        'success': False,
        'error': message,
        'code': code,
        'details': details,
    }
    return response
