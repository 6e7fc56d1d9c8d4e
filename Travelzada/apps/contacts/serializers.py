from rest_framework import serializers

from .models import ContactMessage


class ContactMessageSerializer(serializers.ModelSerializer):
    class Meta:
        model = ContactMessage
        fields = [
            "id",
            "name",
            "email",
            "phone",
            "destination",
            "message",
            "status",
            "read",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_email(self, value):
        return value.strip().lower()


class ContactMessageCreateSerializer(ContactMessageSerializer):
    """Public contact form; status and read flag are fixed on creation."""

    class Meta(ContactMessageSerializer.Meta):
        read_only_fields = ["id", "status", "read", "created_at", "updated_at"]

    def create(self, validated_data):
        validated_data["status"] = ContactMessage.STATUS_NEW
        validated_data["read"] = False
        return super().create(validated_data)
