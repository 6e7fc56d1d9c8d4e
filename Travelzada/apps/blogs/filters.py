import django_filters
from django.db.models import Q

from apps.api.filters import CreatedAtFilterSet
from .models import BlogPost


class BlogPostFilter(CreatedAtFilterSet):
    category = django_filters.CharFilter(field_name="category", lookup_expr="iexact")
    published = django_filters.BooleanFilter(field_name="published")
    featured = django_filters.BooleanFilter(field_name="featured")
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = BlogPost
        fields = ["category", "published", "featured", "search"]

    def filter_search(self, queryset, name, value):
        """Title, description or author"""
        return queryset.filter(
            Q(title__icontains=value) |
            Q(description__icontains=value) |
            Q(author__icontains=value)
        )
