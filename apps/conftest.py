import pytest
from datetime import date, time, timedelta
from decimal import Decimal
from django.core.cache import cache
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import AccountStatus, Role, User
from apps.attendance.models import Attendance
from apps.events.models import Event
from apps.ledger.models import AinaBucksTransaction, TransactionType
from apps.registrations.models import Registration
from apps.rewards.models import Reward


def client_for(user):
    """Return a new API client authenticated as ``user`` using JWT."""
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture(autouse=True)
def clear_view_cache():
    """Cached views must not leak between tests."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def volunteer(db):
    """Create and return an approved volunteer."""
    return User.objects.create_user(
        email='volunteer@example.com',
        password='TestPass123!',
        full_name='Leilani Volunteer',
        status=AccountStatus.APPROVED,
    )


@pytest.fixture
def other_volunteer(db):
    """Create and return another approved volunteer."""
    return User.objects.create_user(
        email='other@example.com',
        password='TestPass123!',
        full_name='Kai Volunteer',
        status=AccountStatus.APPROVED,
    )


@pytest.fixture
def third_volunteer(db):
    return User.objects.create_user(
        email='third@example.com',
        password='TestPass123!',
        full_name='Noe Volunteer',
        status=AccountStatus.APPROVED,
    )


@pytest.fixture
def pending_user(db):
    """Create and return a user whose account awaits approval."""
    return User.objects.create_user(
        email='pending@example.com',
        password='TestPass123!',
        full_name='Pending Person',
    )


@pytest.fixture
def admin_account(db):
    """Create and return an approved administrator."""
    return User.objects.create_user(
        email='admin@example.com',
        password='AdminPass123!',
        full_name='Admin Person',
        role=Role.ADMIN,
        status=AccountStatus.APPROVED,
    )


@pytest.fixture
def volunteer_client(volunteer):
    return client_for(volunteer)


@pytest.fixture
def other_client(other_volunteer):
    return client_for(other_volunteer)


@pytest.fixture
def pending_client(pending_user):
    return client_for(pending_user)


@pytest.fixture
def admin_api_client(admin_account):
    return client_for(admin_account)


@pytest.fixture
def make_event(db, admin_account):
    """Factory for events; defaults to 2 spots at 15 ʻĀina Bucks per hour."""
    def _make_event(**overrides):
        fields = {
            'title': 'Beach Restoration',
            'category': 'Restoration',
            'description': 'Remove invasive plants along the coastline.',
            'date': date.today() + timedelta(days=7),
            'start_time': time(8, 0),
            'end_time': time(12, 0),
            'location_name': 'Waikiki Beach',
            'address': '2335 Kalakaua Ave',
            'city': 'Honolulu',
            'state': 'HI',
            'zip_code': '96815',
            'volunteers_needed': 2,
            'duration': Decimal('4.00'),
            'aina_bucks': 60,
            'bucks_per_hour': 15,
            'what_to_bring': ['Water bottle', 'Sunscreen'],
            'requirements': ['Closed-toe shoes'],
            'coordinator_name': 'Malia Akana',
            'coordinator_email': 'malia@example.com',
            'coordinator_phone': '808-555-0100',
            'created_by': admin_account,
        }
        fields.update(overrides)
        return Event.objects.create(**fields)

    return _make_event


@pytest.fixture
def event(make_event):
    return make_event()


@pytest.fixture
def registration(volunteer, event):
    """Active registration of the volunteer for the event."""
    return Registration.objects.create(user=volunteer, event=event)


@pytest.fixture
def attendance(volunteer, event, registration):
    """Volunteer checked in four hours ago, not checked out."""
    return Attendance.objects.create(
        user=volunteer,
        event=event,
        registration=registration,
        check_in_time=timezone.now() - timedelta(hours=4),
    )


@pytest.fixture
def make_reward(db, admin_account):
    def _make_reward(**overrides):
        fields = {
            'name': 'Reusable Water Bottle',
            'description': 'Stainless steel, 750 ml.',
            'aina_bucks_cost': 30,
            'quantity_available': 10,
            'created_by': admin_account,
        }
        fields.update(overrides)
        return Reward.objects.create(**fields)

    return _make_reward


@pytest.fixture
def reward(make_reward):
    return make_reward()


@pytest.fixture
def funded_volunteer(volunteer):
    """Volunteer holding 100 ʻĀina Bucks backed by a ledger entry."""
    AinaBucksTransaction.objects.create(
        user=volunteer,
        type=TransactionType.EARNED,
        amount=100,
        hours_worked=Decimal('5.00'),
        description='Earned 100 ʻĀina Bucks for 5 hours at "Seed event"',
    )
    User.objects.filter(id=volunteer.id).update(
        current_aina_bucks=100,
        total_aina_bucks_earned=100,
        total_hours_volunteered=Decimal('5.00'),
    )
    volunteer.refresh_from_db()
    return volunteer
