"""
Tests for registrations services.

Capacity enforcement, duplicate protection, idempotent cancellation and
the no-show sweep.
"""

import uuid
from datetime import date, timedelta

import pytest
from django.contrib.auth.models import AnonymousUser
from django.db import IntegrityError, transaction

from apps.attendance.models import Attendance
from apps.common.exceptions import UnauthenticatedError, UnauthorizedError
from apps.events.services import EventNotFoundError, get_event_detail
from apps.registrations.models import Registration, RegistrationStatus
from apps.registrations.services import (
    AlreadyRegisteredError,
    EventFullError,
    cancel_registration,
    get_event_registrations,
    get_user_upcoming_events,
    is_user_registered,
    mark_no_shows,
    register_for_event,
)


@pytest.mark.django_db
class TestRegisterForEvent:

    def test_register(self, volunteer, event):
        registration = register_for_event(event_id=event.id, user=volunteer)

        assert registration.status == RegistrationStatus.REGISTERED
        assert registration.user == volunteer
        assert is_user_registered(volunteer.id, event.id)

    def test_register_twice(self, volunteer, event):
        register_for_event(event_id=event.id, user=volunteer)

        with pytest.raises(AlreadyRegisteredError):
            register_for_event(event_id=event.id, user=volunteer)

        assert Registration.objects.filter(user=volunteer, event=event).count() == 1

    def test_capacity_plus_one_is_full(self, event, volunteer, other_volunteer, third_volunteer):
        """With 2 spots, the third registration fails and nothing is written."""
        register_for_event(event_id=event.id, user=volunteer)
        register_for_event(event_id=event.id, user=other_volunteer)

        with pytest.raises(EventFullError, match="No spots remaining"):
            register_for_event(event_id=event.id, user=third_volunteer)

        assert Registration.objects.filter(
            event=event, status=RegistrationStatus.REGISTERED
        ).count() == 2
        assert not Registration.objects.filter(user=third_volunteer).exists()

    def test_cancelled_spot_can_be_taken(self, event, volunteer, other_volunteer, third_volunteer):
        register_for_event(event_id=event.id, user=volunteer)
        register_for_event(event_id=event.id, user=other_volunteer)
        cancel_registration(event_id=event.id, user=volunteer)

        registration = register_for_event(event_id=event.id, user=third_volunteer)

        assert registration.status == RegistrationStatus.REGISTERED

    def test_re_register_after_cancel(self, volunteer, event):
        register_for_event(event_id=event.id, user=volunteer)
        cancel_registration(event_id=event.id, user=volunteer)

        register_for_event(event_id=event.id, user=volunteer)

        statuses = sorted(
            Registration.objects.filter(user=volunteer, event=event).values_list('status', flat=True)
        )
        assert statuses == [RegistrationStatus.CANCELLED, RegistrationStatus.REGISTERED]

    def test_unknown_event(self, volunteer):
        with pytest.raises(EventNotFoundError):
            register_for_event(event_id=uuid.uuid4(), user=volunteer)

    def test_anonymous_user(self, event):
        with pytest.raises(UnauthenticatedError):
            register_for_event(event_id=event.id, user=AnonymousUser())

    def test_active_registration_unique_in_database(self, volunteer, event, registration):
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                Registration.objects.create(user=volunteer, event=event)

    def test_invalidates_event_detail(self, volunteer, event, django_capture_on_commit_callbacks):
        assert get_event_detail(event.id).volunteers_registered == 0

        with django_capture_on_commit_callbacks(execute=True):
            register_for_event(event_id=event.id, user=volunteer)

        assert get_event_detail(event.id).volunteers_registered == 1


@pytest.mark.django_db
class TestCancelRegistration:

    def test_cancel(self, volunteer, event, registration):
        cancelled = cancel_registration(event_id=event.id, user=volunteer)

        assert cancelled == 1
        registration.refresh_from_db()
        assert registration.status == RegistrationStatus.CANCELLED
        assert not is_user_registered(volunteer.id, event.id)

    def test_cancel_is_idempotent(self, volunteer, event, registration):
        cancel_registration(event_id=event.id, user=volunteer)

        assert cancel_registration(event_id=event.id, user=volunteer) == 0
        assert Registration.objects.filter(user=volunteer).count() == 1

    def test_cancel_without_registration(self, volunteer, event):
        assert cancel_registration(event_id=event.id, user=volunteer) == 0

    def test_cancel_leaves_other_users_alone(self, volunteer, other_volunteer, event, registration):
        cancel_registration(event_id=event.id, user=other_volunteer)

        registration.refresh_from_db()
        assert registration.status == RegistrationStatus.REGISTERED


@pytest.mark.django_db
class TestRegistrationQueries:

    def test_upcoming_soonest_first(self, volunteer, make_event):
        later = make_event(title='Later', date=date.today() + timedelta(days=20))
        sooner = make_event(title='Sooner', date=date.today() + timedelta(days=2))
        cancelled = make_event(title='Cancelled')
        for event in (later, sooner, cancelled):
            register_for_event(event_id=event.id, user=volunteer)
        cancel_registration(event_id=cancelled.id, user=volunteer)

        titles = [r.event.title for r in get_user_upcoming_events(volunteer.id)]

        assert titles == ['Sooner', 'Later']

    def test_roster_in_signup_order(self, event, volunteer, other_volunteer):
        register_for_event(event_id=event.id, user=other_volunteer)
        register_for_event(event_id=event.id, user=volunteer)

        roster = [r.user for r in get_event_registrations(event.id)]

        assert roster == [other_volunteer, volunteer]


@pytest.mark.django_db
class TestMarkNoShows:

    def test_marks_only_absent_volunteers(
        self, admin_account, event, volunteer, other_volunteer, registration
    ):
        absent = Registration.objects.create(user=other_volunteer, event=event)
        Attendance.objects.create(user=volunteer, event=event, registration=registration)

        marked = mark_no_shows(event_id=event.id, actor=admin_account)

        assert marked == 1
        absent.refresh_from_db()
        registration.refresh_from_db()
        assert absent.status == RegistrationStatus.NO_SHOW
        assert registration.status == RegistrationStatus.REGISTERED

    def test_cancelled_registrations_untouched(self, admin_account, event, volunteer, registration):
        cancel_registration(event_id=event.id, user=volunteer)

        assert mark_no_shows(event_id=event.id, actor=admin_account) == 0
        registration.refresh_from_db()
        assert registration.status == RegistrationStatus.CANCELLED

    def test_requires_admin(self, volunteer, event, registration):
        with pytest.raises(UnauthorizedError):
            mark_no_shows(event_id=event.id, actor=volunteer)

    def test_unknown_event(self, admin_account):
        with pytest.raises(EventNotFoundError):
            mark_no_shows(event_id=uuid.uuid4(), actor=admin_account)
