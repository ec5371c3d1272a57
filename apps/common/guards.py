"""
Authorization guard for privileged service operations.

Admin-only services take the acting user as the ``actor`` keyword argument
and are wrapped with ``admin_required``, so the role check lives in one
place instead of being repeated in every function.

Usage:
    @admin_required
    def award_aina_bucks(*, attendance_id, hours_worked, actor, admin_notes=''):
        ...
"""

from functools import wraps

from .exceptions import UnauthenticatedError, UnauthorizedError


def ensure_authenticated(user):
    if user is None or not getattr(user, 'is_authenticated', False):
        raise UnauthenticatedError()


def ensure_admin(user):
    """Raise unless ``user`` is an approved administrator."""
    ensure_authenticated(user)
    if not getattr(user, 'is_admin', False) or not getattr(user, 'is_approved', False):
        raise UnauthorizedError()


def admin_required(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        ensure_admin(kwargs.get('actor'))
        return func(*args, **kwargs)

    return wrapper
