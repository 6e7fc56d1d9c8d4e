from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from rest_framework import serializers

from .models import JobApplication, JobOpening


REQUIRED_MESSAGE = "Please fill in all required fields."


def required_text(**kwargs):
    return serializers.CharField(
        error_messages={
            "required": REQUIRED_MESSAGE,
            "blank": REQUIRED_MESSAGE,
            "null": REQUIRED_MESSAGE,
        },
        **kwargs
    )


class JobOpeningSerializer(serializers.ModelSerializer):
    class Meta:
        model = JobOpening
        fields = [
            "id",
            "title",
            "department",
            "location",
            "type",
            "description",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]


class JobApplicationSerializer(serializers.ModelSerializer):
    name = required_text(max_length=150)
    email = required_text(max_length=254)
    cover_letter = required_text()
    linkedin = serializers.CharField(max_length=500, required=False, allow_blank=True)
    position = serializers.CharField(max_length=200, required=False, allow_blank=True)

    class Meta:
        model = JobApplication
        fields = [
            "id",
            "name",
            "email",
            "phone",
            "linkedin",
            "position",
            "cover_letter",
            "status",
            "read",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_email(self, value):
        value = value.strip().lower()
        try:
            validate_email(value)
        except DjangoValidationError:
            raise serializers.ValidationError("Please enter a valid email address.")
        return value

    def validate_linkedin(self, value):
        value = value.strip()
        if value and "linkedin.com" not in value.lower():
            raise serializers.ValidationError("Please enter a valid LinkedIn profile URL.")
        return value

    def validate_position(self, value):
        return value.strip() or JobApplication.DEFAULT_POSITION


class JobApplicationCreateSerializer(JobApplicationSerializer):
    """Public application form."""

    class Meta(JobApplicationSerializer.Meta):
        read_only_fields = ["id", "status", "read", "created_at", "updated_at"]

    def create(self, validated_data):
        validated_data.setdefault("position", JobApplication.DEFAULT_POSITION)
        validated_data["status"] = JobApplication.STATUS_NEW
        validated_data["read"] = False
        return super().create(validated_data)
