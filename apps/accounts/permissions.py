"""
Approval and role permissions shared by every app.

Permission Classes:
    IsApprovedUser - Signed in with an APPROVED account
    IsApprovedAdmin - Signed in as an APPROVED administrator

Pending and rejected accounts can sign in and read their own session, but
every volunteer and admin endpoint requires approval.
"""

from rest_framework.permissions import BasePermission


class IsApprovedUser(BasePermission):
    """Permission: User must be authenticated and approved."""

    message = 'Your account is awaiting approval.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_approved)


class IsApprovedAdmin(BasePermission):
    """Permission: User must be an approved ADMIN."""

    message = 'Unauthorized: Admin access required'

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user
            and user.is_authenticated
            and user.is_approved
            and user.is_admin
        )
