from django.db.models import F, Sum
from django.shortcuts import get_object_or_404
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.response import Response

from apps.api.pagination import StandardPagination
from apps.users.models import TAB_BLOGS
from apps.users.permissions import TabPermissionMixin
from .filters import BlogPostFilter
from .models import BlogPost
from .serializers import BlogPostListSerializer, BlogPostSerializer


class BlogPostViewSet(TabPermissionMixin, viewsets.ModelViewSet):
    """
    Blog posts. Visitors only see published posts; the view and like
    counters are public and updated with ``F()`` expressions.
    """
    queryset = BlogPost.objects.all().order_by("-created_at")
    serializer_class = BlogPostSerializer
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = BlogPostFilter
    ordering_fields = ["title", "category", "date", "views", "likes", "created_at"]
    pagination_class = StandardPagination
    tab = TAB_BLOGS
    public_actions = ("list", "retrieve", "by_slug", "register_view", "like")

    def get_queryset(self):
        queryset = super().get_queryset()
        if not self.has_dashboard_access():
            queryset = queryset.filter(published=True)
        return queryset

    def get_serializer_class(self):
        if self.action == "list":
            return BlogPostListSerializer
        return BlogPostSerializer

    def _increment(self, field):
        post = self.get_object()
        BlogPost.objects.filter(pk=post.pk).update(**{field: F(field) + 1})
        post.refresh_from_db(fields=[field])
        return Response({"id": post.pk, field: getattr(post, field)})

    # ----- EXTRA ENDPOINT: resumen -----
    @action(detail=False, methods=["get"], url_path="resumen", pagination_class=None)
    def resumen(self, request):
        total = BlogPost.objects.count()
        published = BlogPost.objects.filter(published=True).count()
        drafts = BlogPost.objects.filter(published=False).count()
        featured = BlogPost.objects.filter(featured=True).count()
        views = BlogPost.objects.aggregate(total=Sum("views"))["total"] or 0

        data = [
            {"texto": "Total", "valor": str(total)},
            {"texto": "Published", "valor": str(published)},
            {"texto": "Drafts", "valor": str(drafts)},
            {"texto": "Featured", "valor": str(featured)},
            {"texto": "Views", "valor": str(views)},
        ]
        return Response(data)

    @action(detail=False, methods=["get"], url_path=r"by-slug/(?P<slug>[-\w]+)", pagination_class=None)
    def by_slug(self, request, slug=None):
        post = get_object_or_404(self.get_queryset(), slug=slug)
        return Response(BlogPostSerializer(post).data)

    @action(detail=True, methods=["post"], url_path="view")
    def register_view(self, request, pk=None):
        return self._increment("views")

    @action(detail=True, methods=["post"], url_path="like")
    def like(self, request, pk=None):
        return self._increment("likes")

    @action(detail=True, methods=["post"], url_path="toggle-published")
    def toggle_published(self, request, pk=None):
        post = self.get_object()
        post.published = not post.published
        post.save(update_fields=["published", "updated_at"])
        return Response(BlogPostSerializer(post).data)
