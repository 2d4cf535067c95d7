"""
User serializers.
"""
from rest_framework import serializers

from ...application.dtos.user_dto import UserCreateDTO


class UserSerializer(serializers.Serializer):
    """Serializer for user output."""
    id = serializers.IntegerField(read_only=True)
    email = serializers.EmailField(read_only=True)
    username = serializers.CharField(read_only=True)
    first_name = serializers.CharField(read_only=True)
    last_name = serializers.CharField(read_only=True)
    is_active = serializers.BooleanField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class UserCreateSerializer(serializers.Serializer):
    """Serializer for user creation."""
    email = serializers.EmailField()
    username = serializers.CharField(min_length=3, max_length=150)
    first_name = serializers.CharField(max_length=150, required=False, allow_blank=True)
    last_name = serializers.CharField(max_length=150, required=False, allow_blank=True)

    def to_dto(self) -> UserCreateDTO:
        return UserCreateDTO(**self.validated_data)
