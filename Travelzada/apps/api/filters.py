# apps/api/filters.py
from datetime import datetime, timedelta

import django_filters
from django.utils import timezone
from django.utils.timezone import make_aware


DATE_WINDOW_CHOICES = [
    ('today', 'Today'),
    ('week', 'Last 7 days'),
    ('month', 'Last 30 days'),
]


def window_start(value, now=None):
    """Start of the ``today`` / ``week`` / ``month`` window, or None."""
    now = now or timezone.now()
    if value == 'today':
        return timezone.localtime(now).replace(hour=0, minute=0, second=0, microsecond=0)
    if value == 'week':
        return now - timedelta(days=7)
    if value == 'month':
        return now - timedelta(days=30)
    return None


class CreatedAtFilterSet(django_filters.FilterSet):
    """
    Base FilterSet for records carrying ``created_at``.

    Adds ``created_from`` / ``created_to`` (inclusive dates) and ``date``
    (today, week, month).
    """

    created_from = django_filters.DateFilter(
        field_name="created_at",
        lookup_expr="date__gte"
    )
    created_to = django_filters.DateFilter(
        field_name="created_at",
        method="filter_created_to"
    )
    date = django_filters.ChoiceFilter(
        choices=DATE_WINDOW_CHOICES,
        method="filter_date_window"
    )

    def filter_created_to(self, queryset, name, value):
        next_day = datetime.combine(value, datetime.min.time()) + timedelta(days=1)
        next_day = make_aware(next_day)
        return queryset.filter(created_at__lt=next_day)

    def filter_date_window(self, queryset, name, value):
        start = window_start(value)
        if start is None:
            return queryset
        return queryset.filter(created_at__gte=start)
