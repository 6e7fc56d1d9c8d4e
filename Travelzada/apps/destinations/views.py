from django.shortcuts import get_object_or_404
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.response import Response

from apps.api.pagination import StandardPagination
from apps.users.models import TAB_DESTINATIONS
from apps.users.permissions import TabPermissionMixin
from .filters import DestinationFilter
from .models import Destination
from .serializers import DestinationDetailSerializer, DestinationSerializer


class DestinationViewSet(TabPermissionMixin, viewsets.ModelViewSet):
    """
    CRUD of destinations. List, detail and the lookup by slug are public.
    """
    queryset = Destination.objects.all().order_by("name")
    serializer_class = DestinationSerializer
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = DestinationFilter
    ordering_fields = ["name", "country", "region", "rating", "created_at"]
    pagination_class = StandardPagination
    tab = TAB_DESTINATIONS
    public_actions = ("list", "retrieve", "by_slug", "todos")

    # ----- EXTRA ENDPOINT: resumen -----
    @action(detail=False, methods=["get"], url_path="resumen", pagination_class=None)
    def resumen(self, request):
        total = Destination.objects.count()
        india = Destination.objects.filter(region=Destination.REGION_INDIA).count()
        international = Destination.objects.filter(region=Destination.REGION_INTERNATIONAL).count()
        featured = Destination.objects.filter(featured=True).count()
        countries = Destination.objects.exclude(country="").values("country").distinct().count()

        data = [
            {"texto": "Total", "valor": str(total)},
            {"texto": "India", "valor": str(india)},
            {"texto": "International", "valor": str(international)},
            {"texto": "Featured", "valor": str(featured)},
            {"texto": "Countries", "valor": str(countries)},
        ]
        return Response(data)

    # ----- EXTRA ENDPOINT: todos -----
    @action(detail=False, methods=["get"], url_path="todos", pagination_class=None)
    def todos(self, request):
        """
        Simplified list of destinations: name, slug, country and region.
        """
        queryset = (
            self.filter_queryset(self.get_queryset())
            .values("id", "name", "slug", "country", "region", "featured")
        )
        return Response(list(queryset))

    @action(detail=False, methods=["get"], url_path=r"by-slug/(?P<slug>[-\w]+)", pagination_class=None)
    def by_slug(self, request, slug=None):
        destination = get_object_or_404(Destination, slug=slug)
        return Response(DestinationDetailSerializer(destination).data)
