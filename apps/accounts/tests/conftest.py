import pytest
from apps.accounts.models import AccountStatus, User


@pytest.fixture
def inactive_user(db):
    """Create and return a deactivated (but approved) user."""
    return User.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        full_name='Inactive User',
        status=AccountStatus.APPROVED,
        is_active=False,
    )


@pytest.fixture
def rejected_user(db):
    return User.objects.create_user(
        email='rejected@example.com',
        password='TestPass123!',
        full_name='Rejected User',
        status=AccountStatus.REJECTED,
    )
