import django_filters
from django.db.models import Q

from apps.api.filters import CreatedAtFilterSet
from .models import Destination


class DestinationFilter(CreatedAtFilterSet):
    """
    Filters destinations by region, country and featured flag.
    - search=<text> -> name, country or description
    """

    region = django_filters.ChoiceFilter(choices=Destination.REGION_CHOICES)
    country = django_filters.CharFilter(field_name="country", lookup_expr="icontains")
    featured = django_filters.BooleanFilter(field_name="featured")
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = Destination
        fields = ["region", "country", "featured", "search"]

    def filter_search(self, queryset, name, value):
        return queryset.filter(
            Q(name__icontains=value) |
            Q(country__icontains=value) |
            Q(description__icontains=value)
        )
