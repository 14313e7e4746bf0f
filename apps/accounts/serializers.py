from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'username',
            'university',
            'venmo_username',
            'created_at',
            'last_login',
        ]
        read_only_fields = ['id', 'email', 'university', 'created_at', 'last_login']


class UserRegistrationSerializer(serializers.Serializer):
    """Validate registration input; the service creates the user."""

    email = serializers.EmailField(required=True)
    username = serializers.CharField(max_length=100, required=False, allow_blank=True)
    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
            })
        return attrs


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class UserPublicSerializer(serializers.ModelSerializer):
    """Public user info (for displaying hosts, attendees, drivers, etc.)."""

    class Meta:
        model = User
        fields = ['id', 'username', 'university']
        read_only_fields = fields
