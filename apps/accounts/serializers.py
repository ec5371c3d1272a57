from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User, Role, AccountStatus


class UserSerializer(serializers.ModelSerializer):
    """User profile with ʻĀina Bucks balances."""

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'full_name',
            'role',
            'status',
            'current_aina_bucks',
            'total_aina_bucks_earned',
            'total_aina_bucks_redeemed',
            'total_hours_volunteered',
            'created_at',
            'last_login',
        ]
        read_only_fields = fields


class UserMinimalSerializer(serializers.ModelSerializer):
    """Minimal user info for nested serialization."""

    class Meta:
        model = User
        fields = ['id', 'email', 'full_name']
        read_only_fields = fields


class UserRegistrationSerializer(serializers.Serializer):
    """Serializer for sign-up."""

    full_name = serializers.CharField(min_length=3, max_length=255)
    email = serializers.EmailField(max_length=255)
    password = serializers.CharField(
        write_only=True,
        min_length=8,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    confirm_password = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'}
    )

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['confirm_password']:
            raise serializers.ValidationError({
                'confirm_password': 'Passwords do not match'
            })
        return attrs


class UserLoginSerializer(serializers.Serializer):
    """Serializer for sign-in."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class SessionSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    name = serializers.CharField()
    email = serializers.EmailField()
    role = serializers.ChoiceField(choices=Role.choices)
    status = serializers.ChoiceField(choices=AccountStatus.choices)


class UpdateRoleSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=Role.choices)


class UpdateStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=AccountStatus.choices)
