from rest_framework import serializers

from apps.packages.models import Package
from .models import CustomerItinerary


class FlightDetailSerializer(serializers.Serializer):
    type = serializers.CharField(required=False, allow_blank=True, default='')
    airline = serializers.CharField(required=False, allow_blank=True, default='')
    flight_number = serializers.CharField(required=False, allow_blank=True, default='')
    date = serializers.CharField(required=False, allow_blank=True, default='')
    departure_time = serializers.CharField(required=False, allow_blank=True, default='')
    arrival_time = serializers.CharField(required=False, allow_blank=True, default='')

    def get_fields(self):
        fields = super().get_fields()
        # "from" is a reserved word, so these two keys are added here
        fields['from'] = serializers.CharField(required=False, allow_blank=True, default='')
        fields['to'] = serializers.CharField(required=False, allow_blank=True, default='')
        return fields


class HotelDetailSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True, default='')
    city = serializers.CharField(required=False, allow_blank=True, default='')
    check_in = serializers.CharField(required=False, allow_blank=True, default='')
    check_out = serializers.CharField(required=False, allow_blank=True, default='')
    room_type = serializers.CharField(required=False, allow_blank=True, default='')
    nights = serializers.IntegerField(required=False, min_value=0, default=0)


class ItineraryDaySerializer(serializers.Serializer):
    day = serializers.CharField()
    title = serializers.CharField(required=False, allow_blank=True, default='')
    description = serializers.CharField(required=False, allow_blank=True, default='')


def validate_nested(serializer_class, value):
    serializer = serializer_class(data=value, many=True)
    serializer.is_valid(raise_exception=True)
    return [dict(item) for item in serializer.validated_data]


class CustomerItinerarySerializer(serializers.ModelSerializer):
    package_id = serializers.PrimaryKeyRelatedField(
        source="package",
        queryset=Package.objects.all(),
        required=False,
        allow_null=True
    )

    class Meta:
        model = CustomerItinerary
        fields = [
            "id",
            "client_name",
            "client_email",
            "client_phone",
            "package_id",
            "package_name",
            "destination_name",
            "travel_date",
            "adults",
            "children",
            "total_cost",
            "advance_paid",
            "balance_due",
            "flights",
            "hotels",
            "custom_itinerary",
            "notes",
            "customer_review",
            "status",
            "history",
            "created_by",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "balance_due", "history", "created_by", "created_at", "updated_at"]

    def validate_flights(self, value):
        return validate_nested(FlightDetailSerializer, value)

    def validate_hotels(self, value):
        return validate_nested(HotelDetailSerializer, value)

    def validate_custom_itinerary(self, value):
        return validate_nested(ItineraryDaySerializer, value)

    def validate(self, attrs):
        total = attrs.get("total_cost", getattr(self.instance, "total_cost", 0))
        advance = attrs.get("advance_paid", getattr(self.instance, "advance_paid", 0))
        if total is not None and total < 0:
            raise serializers.ValidationError({"total_cost": "Total cost cannot be negative."})
        if advance is not None and advance < 0:
            raise serializers.ValidationError({"advance_paid": "Advance paid cannot be negative."})
        return attrs


class ItineraryGenerateSerializer(serializers.Serializer):
    """Input of the itinerary generator: client data plus the chosen package."""

    client_name = serializers.CharField(max_length=150)
    client_email = serializers.EmailField(required=False, allow_blank=True, default='')
    client_phone = serializers.CharField(max_length=30, required=False, allow_blank=True, default='')
    package_id = serializers.CharField()
    travel_date = serializers.DateField(required=False, allow_null=True, default=None)
    adults = serializers.IntegerField(min_value=1, required=False, default=2)
    children = serializers.IntegerField(min_value=0, required=False, default=0)
    total_cost = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True, default=None)
    advance_paid = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False, default=0)
    flights = serializers.ListField(required=False, default=list)
    hotels = serializers.ListField(required=False, default=list)
    custom_itinerary = serializers.ListField(required=False, default=list)
    notes = serializers.CharField(required=False, allow_blank=True, default='')

    def validate_package_id(self, value):
        """Accepts the package ``Destination_ID`` or its database id."""
        value = value.strip()
        package = Package.objects.filter(destination_id__iexact=value).first()
        if package is None and value.isdigit():
            package = Package.objects.filter(pk=int(value)).first()
        if package is None:
            raise serializers.ValidationError("Package not found.")
        return package

    def validate_flights(self, value):
        return validate_nested(FlightDetailSerializer, value)

    def validate_hotels(self, value):
        return validate_nested(HotelDetailSerializer, value)

    def validate_custom_itinerary(self, value):
        return validate_nested(ItineraryDaySerializer, value)
