import django_filters
from django.db.models import Q

from apps.api.filters import CreatedAtFilterSet
from .models import Package


class PackageFilter(CreatedAtFilterSet):
    destination = django_filters.CharFilter(field_name="destination_name", lookup_expr="icontains")
    destination_id = django_filters.CharFilter(field_name="destination_id", lookup_expr="iexact")
    travel_type = django_filters.CharFilter(field_name="travel_type", lookup_expr="iexact")
    budget_category = django_filters.CharFilter(field_name="budget_category", lookup_expr="iexact")
    star_category = django_filters.CharFilter(field_name="star_category", lookup_expr="iexact")
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = Package
        fields = ["destination", "destination_id", "travel_type", "budget_category", "star_category", "search"]

    def filter_search(self, queryset, name, value):
        """Name, ID, overview or travel type containing the text."""
        value = value.strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(destination_name__icontains=value)
            | Q(destination_id__icontains=value)
            | Q(overview__icontains=value)
            | Q(travel_type__icontains=value)
        )
