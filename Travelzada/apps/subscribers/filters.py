import django_filters

from apps.api.filters import CreatedAtFilterSet
from .models import Subscriber


class SubscriberFilter(CreatedAtFilterSet):
    status = django_filters.ChoiceFilter(choices=Subscriber.STATUS_CHOICES)
    source = django_filters.CharFilter(field_name="source", lookup_expr="iexact")
    search = django_filters.CharFilter(field_name="email", lookup_expr="icontains")

    class Meta:
        model = Subscriber
        fields = ["status", "source", "search"]
