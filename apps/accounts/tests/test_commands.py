from io import StringIO

import pytest
from django.core.management import call_command

from apps.accounts.models import AccountStatus, Role, User
from apps.events.models import Event
from apps.registrations.models import Registration
from apps.rewards.models import Reward


@pytest.mark.django_db
class TestCreateSampleData:

    def test_creates_sample_data(self):
        out = StringIO()
        call_command('create_sample_data', stdout=out)

        assert 'Sample data created successfully!' in out.getvalue()
        admin = User.objects.get(email='admin@example.com')
        assert admin.role == Role.ADMIN
        assert User.objects.get(email='pending@example.com').status == AccountStatus.PENDING
        assert Event.objects.count() == 4
        assert Reward.objects.count() == 3
        assert Registration.objects.count() == 3

    def test_rerun_is_idempotent(self):
        call_command('create_sample_data', stdout=StringIO())
        call_command('create_sample_data', stdout=StringIO())

        assert User.objects.count() == 4
        assert Event.objects.count() == 4
        assert Registration.objects.count() == 3

    def test_clear(self):
        call_command('create_sample_data', stdout=StringIO())
        first_ids = set(Event.objects.values_list('id', flat=True))

        call_command('create_sample_data', '--clear', stdout=StringIO())

        assert Event.objects.count() == 4
        assert first_ids.isdisjoint(Event.objects.values_list('id', flat=True))
