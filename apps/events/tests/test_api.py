import uuid

import pytest
from django.urls import reverse
from rest_framework import status

from apps.events.models import Event
from apps.registrations.models import Registration


def event_payload(**overrides):
    data = {
        'title': 'Stream Cleanup',
        'category': 'Watershed',
        'description': 'Pull debris from the stream banks.',
        'date': '2030-06-01',
        'start_time': '08:00:00',
        'end_time': '11:00:00',
        'location_name': 'Manoa Stream',
        'address': '3860 Manoa Rd',
        'city': 'Honolulu',
        'state': 'HI',
        'zip_code': '96822',
        'volunteers_needed': 12,
        'duration': '3.00',
        'aina_bucks': 45,
        'bucks_per_hour': 15,
        'what_to_bring': ['Gloves', 'Water'],
        'requirements': [],
        'coordinator_name': 'Pua Lee',
        'coordinator_email': 'pua@example.com',
        'coordinator_phone': '808-555-0111',
    }
    data.update(overrides)
    return data


# =============================================================================
# Catalog Tests
# =============================================================================

@pytest.mark.django_db
class TestEventCatalog:
    """Tests for GET /api/events/"""

    def test_list_events(self, volunteer_client, event, registration):
        response = volunteer_client.get(reverse('events:event-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert response.data['data']['count'] == 1
        entry = response.data['data']['results'][0]
        assert entry['title'] == 'Beach Restoration'
        assert entry['volunteers_registered'] == 1
        assert entry['spots_remaining'] == 1

    def test_tokens_never_listed(self, volunteer_client, event):
        response = volunteer_client.get(reverse('events:event-list'))

        entry = response.data['data']['results'][0]
        assert 'check_in_token' not in entry
        assert 'check_out_token' not in entry
        assert str(event.check_in_token) not in str(response.content)

    def test_search(self, volunteer_client, make_event):
        make_event(title='Beach Cleanup')
        make_event(title='Forest Planting', city='Hilo')

        response = volunteer_client.get(reverse('events:event-list'), {'search': 'hilo'})

        results = response.data['data']['results']
        assert [e['title'] for e in results] == ['Forest Planting']

    def test_unauthenticated(self, api_client, event):
        response = api_client.get(reverse('events:event-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['success'] is False

    def test_pending_forbidden(self, pending_client, event):
        response = pending_client.get(reverse('events:event-list'))
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_categories(self, volunteer_client, make_event):
        make_event(category='Restoration')
        make_event(category='Agriculture')

        response = volunteer_client.get(reverse('events:event-categories'))

        assert response.data['data'] == ['Agriculture', 'Restoration']


@pytest.mark.django_db
class TestEventDetail:
    """Tests for GET /api/events/{id}/"""

    def test_retrieve_registered(self, volunteer_client, event, registration):
        response = volunteer_client.get(reverse('events:event-detail', args=[event.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['id'] == str(event.id)
        assert response.data['data']['is_registered'] is True

    def test_retrieve_not_registered(self, other_client, event, registration):
        response = other_client.get(reverse('events:event-detail', args=[event.id]))

        assert response.data['data']['is_registered'] is False
        assert response.data['data']['volunteers_registered'] == 1

    def test_retrieve_missing(self, volunteer_client):
        response = volunteer_client.get(reverse('events:event-detail', args=[uuid.uuid4()]))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['code'] == 'not_found'


# =============================================================================
# Administration Tests
# =============================================================================

@pytest.mark.django_db
class TestEventAdministration:

    def test_create(self, admin_api_client):
        response = admin_api_client.post(
            reverse('events:event-list'), event_payload(), format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['data']['what_to_bring'] == ['Gloves', 'Water']
        assert Event.objects.filter(title='Stream Cleanup').exists()

    def test_create_end_before_start(self, admin_api_client):
        response = admin_api_client.post(
            reverse('events:event-list'),
            event_payload(start_time='12:00:00', end_time='09:00:00'),
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'end_time' in response.data['details']

    def test_volunteer_cannot_create(self, volunteer_client):
        response = volunteer_client.post(
            reverse('events:event-list'), event_payload(), format='json'
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not Event.objects.exists()

    def test_partial_update(self, admin_api_client, event):
        response = admin_api_client.patch(
            reverse('events:event-detail', args=[event.id]),
            {'volunteers_needed': 25},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        event.refresh_from_db()
        assert event.volunteers_needed == 25

    def test_full_update(self, admin_api_client, event):
        response = admin_api_client.put(
            reverse('events:event-detail', args=[event.id]),
            event_payload(title='Replaced'),
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['title'] == 'Replaced'

    def test_delete(self, admin_api_client, event, registration):
        response = admin_api_client.delete(reverse('events:event-detail', args=[event.id]))

        assert response.status_code == status.HTTP_200_OK
        assert not Event.objects.filter(id=event.id).exists()
        assert not Registration.objects.exists()

    def test_qr_codes_admin_only(self, admin_api_client, volunteer_client, event):
        url = reverse('events:event-qr-codes', args=[event.id])

        response = admin_api_client.get(url)
        assert response.status_code == status.HTTP_200_OK
        assert str(event.check_in_token) in response.data['data']['check_in']['url']

        response = volunteer_client.get(url)
        assert response.status_code == status.HTTP_403_FORBIDDEN
