import django_filters
from django.db.models import Q

from apps.api.filters import CreatedAtFilterSet
from .models import TailoredLead


class TailoredLeadFilter(CreatedAtFilterSet):
    status = django_filters.ChoiceFilter(choices=TailoredLead.STATUS_CHOICES)
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = TailoredLead
        fields = ["status", "search"]

    def filter_search(self, queryset, name, value):
        return queryset.filter(
            Q(contact_name__icontains=value) |
            Q(contact_phone__icontains=value) |
            Q(group_type__icontains=value)
        )
