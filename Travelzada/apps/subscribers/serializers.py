from rest_framework import serializers

from .models import Subscriber


class SubscriberSerializer(serializers.ModelSerializer):
    # Uniqueness is checked by the view so a repeat answers 409
    email = serializers.EmailField(max_length=254)
    source = serializers.CharField(max_length=100, required=False, allow_blank=True)

    class Meta:
        model = Subscriber
        fields = ["id", "email", "status", "source", "created_at", "updated_at"]
        read_only_fields = ["id", "status", "created_at", "updated_at"]

    def validate_email(self, value):
        return value.strip().lower()

    def validate_source(self, value):
        return value.strip() or Subscriber.DEFAULT_SOURCE
