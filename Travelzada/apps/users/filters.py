import django_filters
from django.db.models import Q

from apps.api.filters import CreatedAtFilterSet
from .models import User


class UserFilter(CreatedAtFilterSet):
    email = django_filters.CharFilter(field_name='email', lookup_expr='icontains')
    role = django_filters.ChoiceFilter(choices=User.ROLE_CHOICES)
    is_active = django_filters.BooleanFilter(field_name='is_active')

    # Search by email or display name
    search = django_filters.CharFilter(method='filter_search')

    class Meta:
        model = User
        fields = ['email', 'role', 'is_active', 'created_from', 'created_to', 'search']

    def filter_search(self, queryset, name, value):
        return queryset.filter(
            Q(email__icontains=value) |
            Q(display_name__icontains=value)
        )
