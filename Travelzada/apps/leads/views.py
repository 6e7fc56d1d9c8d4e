from datetime import timedelta

from django.utils import timezone
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.response import Response

from apps.api.pagination import StandardPagination
from apps.users.models import TAB_LEADS
from apps.users.permissions import TabPermissionMixin
from .filters import LeadFilter
from .models import Lead
from .serializers import LeadCreateSerializer, LeadSerializer


class LeadViewSet(TabPermissionMixin, viewsets.ModelViewSet):
    """
    Leads. Anyone can submit one from the site; the dashboard lists,
    edits and moves them through the status funnel.
    """
    queryset = Lead.objects.all().order_by("-created_at")
    serializer_class = LeadSerializer
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = LeadFilter
    ordering_fields = ["name", "status", "package_name", "created_at"]
    pagination_class = StandardPagination
    tab = TAB_LEADS
    public_actions = ("create",)

    def get_serializer_class(self):
        if self.action == "create":
            return LeadCreateSerializer
        return LeadSerializer

    # ----- EXTRA ENDPOINT: resumen -----
    @action(detail=False, methods=["get"], url_path="resumen", pagination_class=None)
    def resumen(self, request):
        week_ago = timezone.now() - timedelta(days=7)
        data = [
            {"texto": "Total", "valor": str(Lead.objects.count())},
            {"texto": "Unread", "valor": str(Lead.objects.filter(read=False).count())},
            {"texto": "This week", "valor": str(Lead.objects.filter(created_at__gte=week_ago).count())},
        ]
        for value, label in Lead.STATUS_CHOICES:
            data.append({"texto": label, "valor": str(Lead.objects.filter(status=value).count())})
        return Response(data)

    @action(detail=True, methods=["post"], url_path="toggle-status")
    def toggle_status(self, request, pk=None):
        lead = self.get_object()
        lead.status = lead.next_status()
        lead.save(update_fields=["status", "updated_at"])
        return Response(LeadSerializer(lead).data)

    @action(detail=True, methods=["post"], url_path="mark-viewed")
    def mark_viewed(self, request, pk=None):
        lead = self.get_object()
        lead.read = True
        if lead.status == Lead.STATUS_NEW:
            lead.status = Lead.STATUS_CONTACTED
        lead.save(update_fields=["read", "status", "updated_at"])
        return Response(LeadSerializer(lead).data)
