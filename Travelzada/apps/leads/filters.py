import django_filters
from django.db.models import Q

from apps.api.filters import CreatedAtFilterSet
from .models import Lead


class LeadFilter(CreatedAtFilterSet):
    """
    Filters leads by status, read flag and creation window.
    - date=today|week|month
    - search=<text> -> name, mobile, package, email or destination
    """

    status = django_filters.ChoiceFilter(choices=Lead.STATUS_CHOICES)
    read = django_filters.BooleanFilter(field_name="read")
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = Lead
        fields = ["status", "read", "search"]

    def filter_search(self, queryset, name, value):
        return queryset.filter(
            Q(name__icontains=value) |
            Q(mobile__icontains=value) |
            Q(package_name__icontains=value) |
            Q(email__icontains=value) |
            Q(destination__icontains=value)
        )
