from rest_framework import serializers

from apps.accounts.serializers import UserMinimalSerializer
from .models import Reward, RewardRedemption


class RewardSerializer(serializers.ModelSerializer):
    quantity_remaining = serializers.IntegerField(read_only=True, allow_null=True)
    is_unlimited = serializers.BooleanField(read_only=True)

    class Meta:
        model = Reward
        fields = [
            'id',
            'name',
            'description',
            'image_url',
            'aina_bucks_cost',
            'quantity_available',
            'quantity_redeemed',
            'quantity_remaining',
            'is_unlimited',
            'status',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class RewardWriteSerializer(serializers.ModelSerializer):
    """Input for creating and updating rewards. -1 means unlimited stock."""

    class Meta:
        model = Reward
        fields = [
            'name',
            'description',
            'image_url',
            'aina_bucks_cost',
            'quantity_available',
            'status',
        ]


class RewardMinimalSerializer(serializers.ModelSerializer):
    class Meta:
        model = Reward
        fields = ['id', 'name', 'image_url', 'aina_bucks_cost']
        read_only_fields = fields


class RedeemSerializer(serializers.Serializer):
    # Lower bound is enforced by the redemption service
    quantity = serializers.IntegerField(default=1)


class RedemptionSerializer(serializers.ModelSerializer):
    reward = RewardMinimalSerializer(read_only=True)
    user = UserMinimalSerializer(read_only=True)

    class Meta:
        model = RewardRedemption
        fields = [
            'id',
            'reward',
            'user',
            'quantity',
            'aina_bucks_spent',
            'status',
            'fulfilled_at',
            'admin_notes',
            'created_at',
        ]
        read_only_fields = fields


class FulfillSerializer(serializers.Serializer):
    admin_notes = serializers.CharField(required=False, allow_blank=True, default='')
