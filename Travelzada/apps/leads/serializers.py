import re

from rest_framework import serializers

from .models import Lead


class LeadCreateSerializer(serializers.ModelSerializer):
    """Public inquiry form: only the name and a 10-digit mobile are required."""

    name = serializers.CharField(
        max_length=150,
        error_messages={
            "required": "Please enter your name.",
            "blank": "Please enter your name.",
            "null": "Please enter your name.",
        }
    )
    mobile = serializers.CharField(
        max_length=30,
        error_messages={
            "required": "Please enter your mobile number.",
            "blank": "Please enter your mobile number.",
            "null": "Please enter your mobile number.",
        }
    )

    class Meta:
        model = Lead
        fields = [
            "id",
            "name",
            "mobile",
            "email",
            "source_url",
            "package_name",
            "destination",
            "travel_date",
            "travelers_count",
            "travel_type",
            "budget",
            "notes",
            "status",
            "read",
            "created_at",
        ]
        read_only_fields = ["id", "status", "read", "created_at"]

    def validate_mobile(self, value):
        digits = re.sub(r"\D", "", value)
        if not digits:
            raise serializers.ValidationError("Please enter your mobile number.")
        if len(digits) != 10:
            raise serializers.ValidationError("Please enter a valid 10-digit mobile number.")
        return digits

    def create(self, validated_data):
        validated_data["status"] = Lead.STATUS_NEW
        validated_data["read"] = False
        return super().create(validated_data)


class LeadSerializer(serializers.ModelSerializer):
    """
    Dashboard detail edit. Text is trimmed and an empty value clears the
    field; ``travelers_count`` must be a positive whole number.
    """

    travelers_count = serializers.IntegerField(
        required=False,
        allow_null=True,
        min_value=1,
        error_messages={
            "invalid": "Travelers count must be a positive number",
            "min_value": "Travelers count must be a positive number",
        }
    )

    mobile = serializers.CharField(max_length=30)

    NULLABLE_FIELDS = ("travel_date", "travelers_count")

    class Meta:
        model = Lead
        fields = [
            "id",
            "name",
            "mobile",
            "email",
            "source_url",
            "package_name",
            "status",
            "read",
            "destination",
            "travel_date",
            "travelers_count",
            "travel_type",
            "budget",
            "notes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def to_internal_value(self, data):
        cleaned = {}
        for key, value in data.items():
            if isinstance(value, str):
                value = value.strip()
            if key in self.NULLABLE_FIELDS and value == "":
                value = None
            cleaned[key] = value
        return super().to_internal_value(cleaned)

    def validate_mobile(self, value):
        digits = re.sub(r"\D", "", value)
        if len(digits) != 10:
            raise serializers.ValidationError("Please enter a valid 10-digit mobile number.")
        return digits
