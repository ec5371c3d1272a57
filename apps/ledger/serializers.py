from rest_framework import serializers

from .models import AinaBucksTransaction


class TransactionSerializer(serializers.ModelSerializer):
    event_id = serializers.UUIDField(read_only=True, allow_null=True)
    event_title = serializers.CharField(source='event.title', read_only=True, default=None)

    class Meta:
        model = AinaBucksTransaction
        fields = [
            'id',
            'type',
            'amount',
            'hours_worked',
            'description',
            'event_id',
            'event_title',
            'created_at',
        ]
        read_only_fields = fields


class AdjustBalanceSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    amount = serializers.IntegerField()
    description = serializers.CharField(max_length=500)


class ReconciliationSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    stored = serializers.DictField()
    expected = serializers.DictField()
    drift = serializers.ListField(child=serializers.CharField())
    repaired = serializers.BooleanField()
