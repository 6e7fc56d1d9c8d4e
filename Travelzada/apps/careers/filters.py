import django_filters
from django.db.models import Q

from apps.api.filters import CreatedAtFilterSet
from .models import JobApplication, JobOpening


class JobOpeningFilter(CreatedAtFilterSet):
    status = django_filters.ChoiceFilter(choices=JobOpening.STATUS_CHOICES)
    department = django_filters.CharFilter(field_name="department", lookup_expr="iexact")
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = JobOpening
        fields = ["status", "department", "search"]

    def filter_search(self, queryset, name, value):
        return queryset.filter(
            Q(title__icontains=value) |
            Q(department__icontains=value) |
            Q(location__icontains=value)
        )


class JobApplicationFilter(CreatedAtFilterSet):
    status = django_filters.ChoiceFilter(choices=JobApplication.STATUS_CHOICES)
    position = django_filters.CharFilter(field_name="position", lookup_expr="icontains")
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = JobApplication
        fields = ["status", "position", "search"]

    def filter_search(self, queryset, name, value):
        return queryset.filter(
            Q(name__icontains=value) |
            Q(email__icontains=value) |
            Q(position__icontains=value)
        )
