from rest_framework import serializers

from apps.accounts.serializers import UserMinimalSerializer
from apps.events.models import Event
from .models import Registration


class EventSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Event
        fields = [
            'id',
            'title',
            'category',
            'image_url',
            'date',
            'start_time',
            'end_time',
            'location_name',
            'city',
            'duration',
            'aina_bucks',
        ]
        read_only_fields = fields


class RegistrationSerializer(serializers.ModelSerializer):
    event_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Registration
        fields = ['id', 'event_id', 'status', 'registered_at']
        read_only_fields = fields


class UpcomingEventSerializer(serializers.ModelSerializer):
    """A volunteer's active registration with the event it is for."""

    event = EventSummarySerializer(read_only=True)

    class Meta:
        model = Registration
        fields = ['id', 'status', 'registered_at', 'event']
        read_only_fields = fields


class RosterEntrySerializer(serializers.ModelSerializer):
    user = UserMinimalSerializer(read_only=True)

    class Meta:
        model = Registration
        fields = ['id', 'user', 'status', 'registered_at']
        read_only_fields = fields
