from rest_framework import serializers

from .models import TailoredLead


DEFAULT_ROUTE_NIGHTS = 2


class RouteItemSerializer(serializers.Serializer):
    destination = serializers.CharField()
    nights = serializers.IntegerField(
        min_value=1,
        default=DEFAULT_ROUTE_NIGHTS,
        error_messages={"min_value": "Each stop needs at least 1 night."}
    )


class PassengersSerializer(serializers.Serializer):
    adults = serializers.IntegerField(min_value=1, default=2)
    kids = serializers.IntegerField(min_value=0, default=0)
    rooms = serializers.IntegerField(min_value=1, default=1)


# ----- Wizard steps -----
class DestinationsStepSerializer(serializers.Serializer):
    destinations = serializers.ListField(
        child=serializers.CharField(),
        min_length=1,
        error_messages={"min_length": "Please select at least one destination.", "required": "Please select at least one destination."}
    )
    date_range = serializers.CharField(allow_blank=True, default="Flexible")


class RouteStepSerializer(serializers.Serializer):
    route_items = RouteItemSerializer(many=True)


class GroupStepSerializer(serializers.Serializer):
    group_type = serializers.CharField(
        error_messages={"blank": "Please select who is travelling.", "required": "Please select who is travelling."}
    )
    experiences = serializers.ListField(child=serializers.CharField(), default=list)


class StayStepSerializer(serializers.Serializer):
    inclusions = serializers.ListField(child=serializers.CharField(), default=list)
    hotel_types = serializers.ListField(
        child=serializers.CharField(),
        min_length=1,
        error_messages={"min_length": "Please select at least one hotel type.", "required": "Please select at least one hotel type."}
    )
    passengers = PassengersSerializer()


class ContactStepSerializer(serializers.Serializer):
    contact_name = serializers.CharField(
        max_length=150,
        error_messages={"blank": "Please enter your name.", "required": "Please enter your name."}
    )
    contact_phone = serializers.CharField(
        max_length=30,
        min_length=10,
        error_messages={
            "blank": "Please enter a valid phone number.",
            "required": "Please enter a valid phone number.",
            "min_length": "Please enter a valid phone number.",
        }
    )


class TailoredLeadSerializer(serializers.ModelSerializer):
    class Meta:
        model = TailoredLead
        fields = [
            "id",
            "lead_id",
            "status",
            "source",
            "destinations",
            "date_range",
            "experiences",
            "route_items",
            "group_type",
            "inclusions",
            "hotel_types",
            "passengers",
            "contact_name",
            "contact_phone",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "lead_id", "source", "created_at", "updated_at"]
