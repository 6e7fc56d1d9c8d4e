from django.db.models import Avg
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.response import Response

from apps.api.pagination import StandardPagination
from apps.users.models import TAB_TESTIMONIALS
from apps.users.permissions import TabPermissionMixin
from .filters import TestimonialFilter
from .models import Testimonial
from .serializers import TestimonialSerializer


class TestimonialViewSet(TabPermissionMixin, viewsets.ModelViewSet):
    queryset = Testimonial.objects.all().order_by("-created_at")
    serializer_class = TestimonialSerializer
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = TestimonialFilter
    ordering_fields = ["name", "created_at", "rating"]
    pagination_class = StandardPagination
    tab = TAB_TESTIMONIALS
    public_actions = ("list", "retrieve")

    # ----- EXTRA ENDPOINT: resumen -----
    @action(detail=False, methods=["get"], url_path="resumen", pagination_class=None)
    def resumen(self, request):
        average = Testimonial.objects.aggregate(avg=Avg("rating"))["avg"] or 0
        data = [
            {"texto": "Total", "valor": str(Testimonial.objects.count())},
            {"texto": "Featured", "valor": str(Testimonial.objects.filter(featured=True).count())},
            {"texto": "Average rating", "valor": f"{average:.1f}"},
        ]
        return Response(data)

    @action(detail=True, methods=["post"], url_path="toggle-featured")
    def toggle_featured(self, request, pk=None):
        testimonial = self.get_object()
        testimonial.featured = not testimonial.featured
        testimonial.save(update_fields=["featured", "updated_at"])
        return Response(TestimonialSerializer(testimonial).data)
