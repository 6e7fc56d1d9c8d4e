from rest_framework import serializers
from rest_framework.utils.serializer_helpers import ReturnDict

from .models import API_TO_FIELD, FIELD_TO_API, Package
from .utils import digits_to_int, first_int, itinerary_to_text, last_int


# ---------------------------------------------------------------------
# Package Serializer
# ---------------------------------------------------------------------
class PackageSerializer(serializers.ModelSerializer):
    """
    Package serializer speaking the spreadsheet column names.

    Incoming keys such as ``Destination_ID`` are mapped onto the model fields
    and the representation is returned with the same names.
    """

    class Meta:
        model = Package
        fields = ["id", *API_TO_FIELD.values(), "created_at", "updated_at"]
        read_only_fields = ["id", "created_at", "updated_at"]

    def to_internal_value(self, data):
        payload = {}
        for key, value in data.items():
            if value is None:
                continue
            payload[API_TO_FIELD.get(key, key)] = value

        itinerary = payload.get("day_wise_itinerary")
        if isinstance(itinerary, list):
            if not payload.get("day_wise_itinerary_details"):
                payload["day_wise_itinerary_details"] = [
                    {
                        "day": item.get("day", index) if isinstance(item, dict) else index,
                        "title": item.get("title", "") if isinstance(item, dict) else "",
                        "description": item.get("description", "") if isinstance(item, dict) else str(item),
                    }
                    for index, item in enumerate(itinerary, start=1)
                ]
            payload["day_wise_itinerary"] = itinerary_to_text(itinerary)

        for key in ("price_min_inr", "price_max_inr"):
            if isinstance(payload.get(key), str):
                payload[key] = digits_to_int(payload[key])
                if payload[key] is None:
                    del payload[key]

        for key in ("inclusions", "exclusions"):
            if isinstance(payload.get(key), list):
                payload[key] = ", ".join(str(item) for item in payload[key])

        return super().to_internal_value(payload)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        return {FIELD_TO_API.get(key, key): value for key, value in data.items()}

    @property
    def errors(self):
        errors = super().errors
        if isinstance(errors, dict):
            return ReturnDict(
                {FIELD_TO_API.get(key, key): value for key, value in errors.items()},
                serializer=self
            )
        return errors

    def validate_destination_id(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Destination_ID is required.")
        return value

    def validate_destination_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Destination_Name is required.")
        return value

    def validate_booking_policies(self, value):
        if not isinstance(value, dict):
            raise serializers.ValidationError("Booking_Policies must be an object.")
        return {
            "booking": list(value.get("booking") or []),
            "payment": list(value.get("payment") or []),
            "cancellation": list(value.get("cancellation") or []),
        }

    def validate(self, attrs):
        stored_min = getattr(self.instance, "price_min_inr", None)
        stored_max = getattr(self.instance, "price_max_inr", None)
        price_range = attrs.get("price_range_inr")
        if price_range and price_range != getattr(self.instance, "price_range_inr", None):
            # bounds not sent are derived again from the new range
            stored_min, stored_max = first_int(price_range), last_int(price_range)
        price_min = attrs.get("price_min_inr", stored_min)
        price_max = attrs.get("price_max_inr", stored_max)
        if price_min is not None and price_max is not None and price_min > price_max:
            raise serializers.ValidationError({
                "price_min_inr": "Price_Min_INR cannot be greater than Price_Max_INR."
            })
        return attrs


class PackageListSerializer(serializers.ModelSerializer):
    """Compact listing for tables and the ``todos`` endpoint."""

    Destination_ID = serializers.CharField(source="destination_id")
    Destination_Name = serializers.CharField(source="destination_name")
    Duration = serializers.CharField(source="duration")
    Price_Range_INR = serializers.CharField(source="price_range_inr")
    Travel_Type = serializers.CharField(source="travel_type")
    Star_Category = serializers.CharField(source="star_category")
    Primary_Image_URL = serializers.CharField(source="primary_image_url")
    Slug = serializers.CharField(source="slug")
    Last_Updated = serializers.DateField(source="last_updated")

    class Meta:
        model = Package
        fields = [
            "id",
            "Destination_ID",
            "Destination_Name",
            "Duration",
            "Price_Range_INR",
            "Travel_Type",
            "Star_Category",
            "Primary_Image_URL",
            "Slug",
            "Last_Updated",
        ]
