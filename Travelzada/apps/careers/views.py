from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.response import Response

from apps.api.pagination import StandardPagination
from apps.users.models import TAB_CAREERS
from apps.users.permissions import TabPermissionMixin
from .filters import JobApplicationFilter, JobOpeningFilter
from .models import JobApplication, JobOpening
from .serializers import (
    JobApplicationCreateSerializer,
    JobApplicationSerializer,
    JobOpeningSerializer,
)


class JobOpeningViewSet(TabPermissionMixin, viewsets.ModelViewSet):
    """Job openings; visitors only get the active ones."""
    queryset = JobOpening.objects.all().order_by("-created_at")
    serializer_class = JobOpeningSerializer
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = JobOpeningFilter
    ordering_fields = ["title", "department", "status", "created_at"]
    pagination_class = StandardPagination
    tab = TAB_CAREERS
    public_actions = ("list", "retrieve")

    def get_queryset(self):
        queryset = super().get_queryset()
        if not self.has_dashboard_access():
            queryset = queryset.filter(status=JobOpening.STATUS_ACTIVE)
        return queryset


class JobApplicationViewSet(TabPermissionMixin, viewsets.ModelViewSet):
    queryset = JobApplication.objects.all().order_by("-created_at")
    serializer_class = JobApplicationSerializer
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = JobApplicationFilter
    ordering_fields = ["name", "position", "status", "created_at"]
    pagination_class = StandardPagination
    tab = TAB_CAREERS
    public_actions = ("create",)

    def get_serializer_class(self):
        if self.action == "create":
            return JobApplicationCreateSerializer
        return JobApplicationSerializer

    # ----- EXTRA ENDPOINT: resumen -----
    @action(detail=False, methods=["get"], url_path="resumen", pagination_class=None)
    def resumen(self, request):
        data = [
            {"texto": "Total", "valor": str(JobApplication.objects.count())},
            {"texto": "Unread", "valor": str(JobApplication.objects.filter(read=False).count())},
            {"texto": "Open positions", "valor": str(JobOpening.objects.filter(status=JobOpening.STATUS_ACTIVE).count())},
        ]
        for value, label in JobApplication.STATUS_CHOICES:
            data.append({"texto": label, "valor": str(JobApplication.objects.filter(status=value).count())})
        return Response(data)

    @action(detail=True, methods=["post"], url_path="mark-reviewed")
    def mark_reviewed(self, request, pk=None):
        application = self.get_object()
        application.read = True
        application.status = JobApplication.STATUS_REVIEWED
        application.save(update_fields=["read", "status", "updated_at"])
        return Response(JobApplicationSerializer(application).data)
