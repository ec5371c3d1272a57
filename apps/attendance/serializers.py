from rest_framework import serializers

from apps.accounts.serializers import UserMinimalSerializer
from .models import Attendance


class AttendanceSerializer(serializers.ModelSerializer):
    event_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Attendance
        fields = [
            'id',
            'event_id',
            'status',
            'check_in_time',
            'check_out_time',
            'hours_worked',
            'awarded',
        ]
        read_only_fields = fields


class AttendanceRosterSerializer(serializers.ModelSerializer):
    """Admin roster row: who, when, the event rate and what was awarded."""

    user = UserMinimalSerializer(read_only=True)
    registration_status = serializers.CharField(source='registration.status', read_only=True)
    bucks_per_hour = serializers.IntegerField(source='event.bucks_per_hour', read_only=True)
    aina_bucks_awarded = serializers.SerializerMethodField()

    class Meta:
        model = Attendance
        fields = [
            'id',
            'user',
            'status',
            'registration_status',
            'check_in_time',
            'check_out_time',
            'hours_worked',
            'bucks_per_hour',
            'awarded',
            'awarded_at',
            'aina_bucks_awarded',
            'admin_notes',
        ]
        read_only_fields = fields

    def get_aina_bucks_awarded(self, obj):
        entry = getattr(obj, 'award_transaction', None)
        return entry.amount if entry else None


class TokenSerializer(serializers.Serializer):
    # Mismatches, blank included, are rejected by the service as invalid_token
    token = serializers.CharField(allow_blank=True, trim_whitespace=False)


class CheckOutResultSerializer(serializers.Serializer):
    attendance_id = serializers.UUIDField()
    check_in_time = serializers.DateTimeField()
    check_out_time = serializers.DateTimeField()
    hours_estimate = serializers.DecimalField(max_digits=12, decimal_places=1)


class AwardSerializer(serializers.Serializer):
    # Range is enforced by the award service
    hours_worked = serializers.DecimalField(max_digits=6, decimal_places=2)
    admin_notes = serializers.CharField(required=False, allow_blank=True, default='')


class AwardResultSerializer(serializers.Serializer):
    aina_bucks = serializers.IntegerField()
    hours_worked = serializers.DecimalField(max_digits=4, decimal_places=2)
