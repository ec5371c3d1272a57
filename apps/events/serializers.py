from rest_framework import serializers

from apps.registrations.models import RegistrationStatus
from .models import Event

PUBLIC_FIELDS = [
    'id',
    'title',
    'category',
    'description',
    'image_url',
    'date',
    'start_time',
    'end_time',
    'location_name',
    'address',
    'city',
    'state',
    'zip_code',
    'volunteers_needed',
    'duration',
    'aina_bucks',
    'bucks_per_hour',
    'what_to_bring',
    'requirements',
    'coordinator_name',
    'coordinator_email',
    'coordinator_phone',
    'created_at',
    'updated_at',
]


class EventSerializer(serializers.ModelSerializer):
    """Public event representation. QR tokens are never included."""

    volunteers_registered = serializers.SerializerMethodField()
    spots_remaining = serializers.SerializerMethodField()

    class Meta:
        model = Event
        fields = PUBLIC_FIELDS + ['volunteers_registered', 'spots_remaining']
        read_only_fields = fields

    def get_volunteers_registered(self, obj):
        count = getattr(obj, 'volunteers_registered', None)
        if count is None:
            count = obj.registrations.filter(status=RegistrationStatus.REGISTERED).count()
        return count

    def get_spots_remaining(self, obj):
        return max(obj.volunteers_needed - self.get_volunteers_registered(obj), 0)


class EventWriteSerializer(serializers.ModelSerializer):
    """Input for creating and updating events (admin)."""

    what_to_bring = serializers.ListField(
        child=serializers.CharField(max_length=255),
        required=False,
    )
    requirements = serializers.ListField(
        child=serializers.CharField(max_length=255),
        required=False,
    )

    class Meta:
        model = Event
        fields = [
            field for field in PUBLIC_FIELDS
            if field not in ('id', 'created_at', 'updated_at')
        ]

    def validate(self, attrs):
        start = attrs.get('start_time', getattr(self.instance, 'start_time', None))
        end = attrs.get('end_time', getattr(self.instance, 'end_time', None))
        if start and end and end <= start:
            raise serializers.ValidationError({
                'end_time': 'End time must be after start time'
            })
        return attrs


class QRCodeSerializer(serializers.Serializer):
    url = serializers.URLField()
    qr_code = serializers.URLField()


class EventQRCodesSerializer(serializers.Serializer):
    event_id = serializers.UUIDField()
    check_in = QRCodeSerializer()
    check_out = QRCodeSerializer()
