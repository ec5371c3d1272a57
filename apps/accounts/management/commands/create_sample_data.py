"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data

This creates:
- 4 users (admin, two approved volunteers, one pending request)
- 4 volunteer events over the coming weeks
- 3 rewards
- Registrations for the approved volunteers
"""

from datetime import date, time, timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import AccountStatus, Role, User
from apps.events.models import Event
from apps.events.services import create_event
from apps.registrations.models import Registration
from apps.registrations.services import register_for_event
from apps.rewards.models import Reward
from apps.rewards.services import create_reward

SAMPLE_EVENTS = [
    {
        'title': 'Community Clean-Up',
        'category': 'Clean-Up',
        'location_name': 'Kapiolani Park',
        'description': 'Join us for a day of cleaning and beautifying our local park.',
        'duration': Decimal('5'),
        'bucks_per_hour': 10,
        'start_time': time(9, 0),
        'end_time': time(14, 0),
        'days_ahead': 7,
    },
    {
        'title': 'Beach Restoration Project',
        'category': 'Restoration',
        'location_name': 'Waikiki Beach',
        'description': 'Help restore native plants and remove invasive species along our coastline.',
        'duration': Decimal('6'),
        'bucks_per_hour': 12,
        'start_time': time(8, 0),
        'end_time': time(14, 0),
        'days_ahead': 10,
    },
    {
        'title': 'Food Bank Volunteer Day',
        'category': 'Community',
        'location_name': 'Hawaii Foodbank',
        'description': 'Sort and pack food donations to help feed families in need across the island.',
        'duration': Decimal('4'),
        'bucks_per_hour': 10,
        'start_time': time(10, 0),
        'end_time': time(14, 0),
        'days_ahead': 14,
    },
    {
        'title': 'Tree Planting',
        'category': 'Restoration',
        'location_name': 'Manoa Valley',
        'description': 'Plant native Hawaiian trees to restore the watershed and support local ecosystems.',
        'duration': Decimal('5'),
        'bucks_per_hour': 12,
        'start_time': time(8, 0),
        'end_time': time(13, 0),
        'days_ahead': 21,
    },
]

SAMPLE_REWARDS = [
    {'name': 'Reusable Water Bottle', 'aina_bucks_cost': 30, 'quantity_available': 50},
    {'name': 'ʻĀina Bucks T-Shirt', 'aina_bucks_cost': 60, 'quantity_available': 25},
    {'name': 'Native Plant Seedling', 'aina_bucks_cost': 20, 'quantity_available': Reward.UNLIMITED},
]


class Command(BaseCommand):
    help = 'Create sample data for testing the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        events = self.create_events(users['admin'])
        self.create_rewards(users['admin'])
        self.create_registrations(users, events)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (admin)')
        self.stdout.write('  leilani@example.com / password123')
        self.stdout.write('  kai@example.com / password123')
        self.stdout.write('  pending@example.com / password123 (awaiting approval)')

    def clear_data(self):
        """Remove sample events, rewards and non-superuser accounts."""
        Registration.objects.all().delete()
        Event.objects.all().delete()
        Reward.objects.filter(redemptions__isnull=True).delete()
        User.objects.filter(is_superuser=False).delete()

    def _user(self, email, full_name, password, **extra):
        user, _ = User.objects.get_or_create(
            email=email,
            defaults={'full_name': full_name, **extra},
        )
        user.set_password(password)
        user.save()
        return user

    def create_users(self):
        self.stdout.write('  Creating users...')

        return {
            'admin': self._user(
                'admin@example.com', 'Admin User', 'admin123',
                role=Role.ADMIN, status=AccountStatus.APPROVED, is_staff=True, is_superuser=True,
            ),
            'leilani': self._user(
                'leilani@example.com', 'Leilani Kahale', 'password123',
                status=AccountStatus.APPROVED,
            ),
            'kai': self._user(
                'kai@example.com', 'Kai Nakamura', 'password123',
                status=AccountStatus.APPROVED,
            ),
            'pending': self._user(
                'pending@example.com', 'Pending Volunteer', 'password123',
            ),
        }

    def create_events(self, admin):
        self.stdout.write('  Creating events...')

        today = date.today()
        events = []
        for sample in SAMPLE_EVENTS:
            existing = Event.objects.filter(title=sample['title']).first()
            if existing:
                events.append(existing)
                continue

            fields = {key: value for key, value in sample.items() if key != 'days_ahead'}
            events.append(create_event(
                actor=admin,
                date=today + timedelta(days=sample['days_ahead']),
                address='1 Aloha Way',
                city='Honolulu',
                state='HI',
                zip_code='96815',
                volunteers_needed=20,
                aina_bucks=int(sample['duration'] * sample['bucks_per_hour']),
                what_to_bring=['Water bottle', 'Sunscreen', 'Closed-toe shoes'],
                requirements=['Ages 12+'],
                coordinator_name='Malia Akana',
                coordinator_email='volunteer@example.com',
                coordinator_phone='808-555-0100',
                **fields,
            ))
        return events

    def create_rewards(self, admin):
        self.stdout.write('  Creating rewards...')

        for sample in SAMPLE_REWARDS:
            if not Reward.objects.filter(name=sample['name']).exists():
                create_reward(actor=admin, **sample)

    def create_registrations(self, users, events):
        self.stdout.write('  Creating registrations...')

        for user, event in [
            (users['leilani'], events[0]),
            (users['leilani'], events[1]),
            (users['kai'], events[0]),
        ]:
            if not Registration.objects.filter(user=user, event=event).exists():
                register_for_event(event_id=event.id, user=user)
