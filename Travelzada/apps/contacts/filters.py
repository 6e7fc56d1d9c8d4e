import django_filters
from django.db.models import Q

from apps.api.filters import CreatedAtFilterSet
from .models import ContactMessage


class ContactMessageFilter(CreatedAtFilterSet):
    status = django_filters.ChoiceFilter(choices=ContactMessage.STATUS_CHOICES)
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = ContactMessage
        fields = ["status", "search"]

    def filter_search(self, queryset, name, value):
        return queryset.filter(
            Q(name__icontains=value) |
            Q(email__icontains=value) |
            Q(phone__icontains=value) |
            Q(destination__icontains=value) |
            Q(message__icontains=value)
        )
