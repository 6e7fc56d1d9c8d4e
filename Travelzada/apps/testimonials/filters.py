import django_filters
from django.db.models import Q

from .models import Testimonial


class TestimonialFilter(django_filters.FilterSet):
    rating = django_filters.NumberFilter(field_name="rating")
    featured = django_filters.BooleanFilter(field_name="featured")
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = Testimonial
        fields = ["rating", "featured", "search"]

    def filter_search(self, queryset, name, value):
        return queryset.filter(Q(name__icontains=value) | Q(quote__icontains=value))
