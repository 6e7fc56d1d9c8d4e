import logging

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.response import Response

from apps.api.pagination import StandardPagination
from apps.users.models import TAB_SUBSCRIBERS
from apps.users.permissions import TabPermissionMixin
from .filters import SubscriberFilter
from .models import Subscriber
from .serializers import SubscriberSerializer

logger = logging.getLogger(__name__)


class SubscriberViewSet(TabPermissionMixin, viewsets.ModelViewSet):
    queryset = Subscriber.objects.all().order_by("-created_at")
    serializer_class = SubscriberSerializer
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = SubscriberFilter
    ordering_fields = ["email", "status", "source", "created_at"]
    pagination_class = StandardPagination
    tab = TAB_SUBSCRIBERS
    public_actions = ("create",)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        email = serializer.validated_data["email"]
        if Subscriber.objects.filter(email__iexact=email).exists():
            return Response(
                {"message": "This email is already subscribed!"},
                status=status.HTTP_409_CONFLICT
            )

        serializer.save()
        logger.info("New newsletter subscriber from %s", serializer.instance.source)
        return Response(serializer.data, status=status.HTTP_201_CREATED)

    # ----- EXTRA ENDPOINT: resumen -----
    @action(detail=False, methods=["get"], url_path="resumen", pagination_class=None)
    def resumen(self, request):
        data = [{"texto": "Total", "valor": str(Subscriber.objects.count())}]
        for value, label in Subscriber.STATUS_CHOICES:
            data.append({"texto": label, "valor": str(Subscriber.objects.filter(status=value).count())})
        return Response(data)

    @action(detail=True, methods=["post"], url_path="toggle-status")
    def toggle_status(self, request, pk=None):
        subscriber = self.get_object()
        if subscriber.status == Subscriber.STATUS_ACTIVE:
            subscriber.status = Subscriber.STATUS_UNSUBSCRIBED
        else:
            subscriber.status = Subscriber.STATUS_ACTIVE
        subscriber.save(update_fields=["status", "updated_at"])
        return Response(SubscriberSerializer(subscriber).data)
