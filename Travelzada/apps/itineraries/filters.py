import django_filters
from django.db.models import Q

from apps.api.filters import CreatedAtFilterSet
from .models import CustomerItinerary


class CustomerItineraryFilter(CreatedAtFilterSet):
    status = django_filters.ChoiceFilter(choices=CustomerItinerary.STATUS_CHOICES)
    travel_from = django_filters.DateFilter(field_name="travel_date", lookup_expr="gte")
    travel_to = django_filters.DateFilter(field_name="travel_date", lookup_expr="lte")
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = CustomerItinerary
        fields = ["status", "travel_from", "travel_to", "search"]

    def filter_search(self, queryset, name, value):
        """Client name, email, phone or package name."""
        return queryset.filter(
            Q(client_name__icontains=value) |
            Q(client_email__icontains=value) |
            Q(client_phone__icontains=value) |
            Q(package_name__icontains=value)
        )
