from rest_framework import serializers

from apps.packages.serializers import PackageListSerializer
from apps.packages.services import packages_for_destination
from .models import Destination


class DestinationSerializer(serializers.ModelSerializer):
    slug = serializers.SlugField(required=False, allow_blank=True, max_length=160)

    class Meta:
        model = Destination
        fields = [
            "id",
            "name",
            "country",
            "region",
            "description",
            "image",
            "slug",
            "featured",
            "rating",
            "package_ids",
            "best_time_to_visit",
            "highlights",
            "activities",
            "budget_range",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["created_at", "updated_at"]

    def validate_slug(self, value):
        if value:
            queryset = Destination.objects.filter(slug=value)
            if self.instance is not None:
                queryset = queryset.exclude(pk=self.instance.pk)
            if queryset.exists():
                raise serializers.ValidationError("A destination with this slug already exists.")
        return value

    def validate_rating(self, value):
        if value is not None and not (0 <= value <= 5):
            raise serializers.ValidationError("Rating must be between 0 and 5.")
        return value

    def validate_package_ids(self, value):
        if not isinstance(value, list):
            raise serializers.ValidationError("package_ids must be a list.")
        return [str(item).strip() for item in value if str(item).strip()]


class DestinationDetailSerializer(DestinationSerializer):
    """Destination plus the packages shown on its page."""

    packages = serializers.SerializerMethodField()

    class Meta(DestinationSerializer.Meta):
        fields = DestinationSerializer.Meta.fields + ["packages"]

    def get_packages(self, obj):
        return PackageListSerializer(
            packages_for_destination(obj.name, obj.package_ids),
            many=True
        ).data
