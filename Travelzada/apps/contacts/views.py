from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.response import Response

from apps.api.pagination import StandardPagination
from apps.users.models import TAB_CONTACTS
from apps.users.permissions import TabPermissionMixin
from .filters import ContactMessageFilter
from .models import ContactMessage
from .serializers import ContactMessageCreateSerializer, ContactMessageSerializer


class ContactMessageViewSet(TabPermissionMixin, viewsets.ModelViewSet):
    queryset = ContactMessage.objects.all().order_by("-created_at")
    serializer_class = ContactMessageSerializer
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = ContactMessageFilter
    ordering_fields = ["name", "email", "status", "created_at"]
    pagination_class = StandardPagination
    tab = TAB_CONTACTS
    public_actions = ("create",)

    def get_serializer_class(self):
        if self.action == "create":
            return ContactMessageCreateSerializer
        return ContactMessageSerializer

    # ----- EXTRA ENDPOINT: resumen -----
    @action(detail=False, methods=["get"], url_path="resumen", pagination_class=None)
    def resumen(self, request):
        data = [
            {"texto": "Total", "valor": str(ContactMessage.objects.count())},
            {"texto": "Unread", "valor": str(ContactMessage.objects.filter(read=False).count())},
        ]
        for value, label in ContactMessage.STATUS_CHOICES:
            data.append({"texto": label, "valor": str(ContactMessage.objects.filter(status=value).count())})
        return Response(data)

    @action(detail=True, methods=["post"], url_path="mark-read")
    def mark_read(self, request, pk=None):
        message = self.get_object()
        message.read = True
        message.status = ContactMessage.STATUS_READ
        message.save(update_fields=["read", "status", "updated_at"])
        return Response(ContactMessageSerializer(message).data)
