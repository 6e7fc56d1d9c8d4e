from rest_framework import serializers
from .models import User, TAB_NAMES
import secrets
import string


def validate_tab_list(value):
    if not isinstance(value, list):
        raise serializers.ValidationError("Permissions must be a list of tab names.")
    invalid = [tab for tab in value if tab not in TAB_NAMES]
    if invalid:
        raise serializers.ValidationError(f"Invalid permissions: {', '.join(map(str, invalid))}")
    # keep order, drop repeats
    return list(dict.fromkeys(value))


# Serializer used for listing and detail
class UserListSerializer(serializers.ModelSerializer):
    is_admin = serializers.BooleanField(read_only=True)

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'display_name',
            'photo_url',
            'role',
            'is_admin',
            'permissions',
            'is_active',
            'last_login',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


# Serializer for dashboard creation/updates
class UserCreateSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True, required=False)
    permissions = serializers.JSONField(required=False)

    class Meta:
        model = User
        fields = ['id', 'email', 'password', 'display_name', 'photo_url', 'permissions', 'is_active']

    def validate_email(self, value):
        value = value.strip().lower()
        queryset = User.objects.filter(email=value)
        if self.instance is not None:
            queryset = queryset.exclude(pk=self.instance.pk)
        if queryset.exists():
            raise serializers.ValidationError("A user with this email already exists.")
        return value

    def validate_permissions(self, value):
        return validate_tab_list(value)

    def generate_password(self, length=10):
        """Random temporary password for accounts created from the dashboard."""
        characters = string.ascii_letters + string.digits + "!@#$%^&*()"
        return ''.join(secrets.choice(characters) for _ in range(length))

    def create(self, validated_data):
        password = validated_data.pop('password', None)
        if not password:
            password = self.generate_password()
        user = User.objects.create_user(password=password, **validated_data)
        # Returned once so the admin can hand it over
        user.generated_password = password
        return user

    def update(self, instance, validated_data):
        password = validated_data.pop('password', None)
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        if password:
            instance.set_password(password)
        instance.save()
        return instance

    def to_representation(self, instance):
        data = UserListSerializer(instance).data
        if hasattr(instance, 'generated_password'):
            data['generated_password'] = instance.generated_password
        return data


class SignupSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True, min_length=6)

    class Meta:
        model = User
        fields = ['id', 'email', 'password', 'display_name', 'photo_url']

    def validate_email(self, value):
        value = value.strip().lower()
        if User.objects.filter(email=value).exists():
            raise serializers.ValidationError("A user with this email already exists.")
        return value

    def create(self, validated_data):
        return User.objects.create_user(
            role=User.ROLE_USER,
            permissions=[],
            is_active=True,
            **validated_data
        )

    def to_representation(self, instance):
        return UserListSerializer(instance).data


class PermissionsSerializer(serializers.Serializer):
    permissions = serializers.JSONField()

    def validate_permissions(self, value):
        return validate_tab_list(value)
