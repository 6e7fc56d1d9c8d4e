import logging

from django.db.models import Sum
from django.http import FileResponse
from django.utils import timezone
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status, viewsets
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.filters import OrderingFilter
from rest_framework.response import Response

from apps.api.pagination import StandardPagination
from apps.api.responses import error_response
from apps.packages.serializers import PackageListSerializer
from apps.packages.services import packages_for_destination as matching_packages
from apps.packages.utils import digits_to_int
from apps.users.models import TAB_CREATE_ITINERARY, TAB_CUSTOMER_RECORDS
from apps.users.permissions import TabPermissionMixin, tab_permission
from .filters import CustomerItineraryFilter
from .models import CustomerItinerary
from .pdf import itinerary_filename, render_itinerary_pdf
from .serializers import CustomerItinerarySerializer, ItineraryGenerateSerializer

logger = logging.getLogger(__name__)


def acting_user(request):
    user = request.user
    return getattr(user, "email", "") or "admin"


def pdf_response(buffer, client_name):
    return FileResponse(
        buffer,
        as_attachment=True,
        filename=itinerary_filename(client_name),
        content_type="application/pdf"
    )


# -------------------- VIEWSET --------------------
class CustomerItineraryViewSet(TabPermissionMixin, viewsets.ModelViewSet):
    """
    Customer records. Every edit is written to the record history and
    ``balance_due`` follows the cost and the advance.
    """
    queryset = CustomerItinerary.objects.select_related("package").order_by("-created_at")
    serializer_class = CustomerItinerarySerializer
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = CustomerItineraryFilter
    ordering_fields = ["client_name", "travel_date", "total_cost", "balance_due", "status", "created_at"]
    pagination_class = StandardPagination
    tab = TAB_CUSTOMER_RECORDS

    def perform_create(self, serializer):
        user = acting_user(self.request)
        client = serializer.validated_data.get("client_name")
        serializer.save(
            created_by=user,
            history=[CustomerItinerary.history_entry("Record created", f"Record created for {client}", user)]
        )

    def perform_update(self, serializer):
        record = serializer.instance
        history = list(record.history or []) + [
            CustomerItinerary.history_entry(
                "Record updated", "Customer details modified by admin", acting_user(self.request)
            )
        ]
        serializer.save(history=history)

    @action(detail=True, methods=["post"], url_path="change-status")
    def change_status(self, request, pk=None):
        record = self.get_object()
        new_status = request.data.get("status")
        if new_status not in dict(CustomerItinerary.STATUS_CHOICES):
            return error_response(f"Invalid status: {new_status}")

        previous = record.status
        record.status = new_status
        record.add_history(f"Status changed to {new_status}", f"Previous status: {previous}", acting_user(request))
        record.save(update_fields=["status", "history", "updated_at"])
        return Response(CustomerItinerarySerializer(record).data)

    @action(detail=True, methods=["post"], url_path="add-note")
    def add_note(self, request, pk=None):
        record = self.get_object()
        note = str(request.data.get("note") or "").strip()
        if not note:
            return error_response("Note cannot be empty")

        stamped = f"[{timezone.localdate().strftime('%d/%m/%Y')}] {note}"
        record.notes = f"{record.notes}\n\n{stamped}" if record.notes else stamped
        record.add_history("Note added", note, acting_user(request))
        record.save(update_fields=["notes", "history", "updated_at"])
        return Response(CustomerItinerarySerializer(record).data)

    @action(detail=False, methods=["get"], url_path="stats", pagination_class=None)
    def stats(self, request):
        queryset = CustomerItinerary.objects.all()
        data = {"total": queryset.count()}
        for value, _ in CustomerItinerary.STATUS_CHOICES:
            data[value] = queryset.filter(status=value).count()

        revenue = queryset.filter(status=CustomerItinerary.STATUS_COMPLETED).aggregate(total=Sum("total_cost"))["total"]
        pending = queryset.filter(
            status__in=[CustomerItinerary.STATUS_SENT, CustomerItinerary.STATUS_CONFIRMED]
        ).aggregate(total=Sum("balance_due"))["total"]
        data["totalRevenue"] = float(revenue or 0)
        data["pendingRevenue"] = float(pending or 0)
        return Response(data)

    @action(detail=True, methods=["get"], url_path="pdf")
    def pdf(self, request, pk=None):
        record = self.get_object()
        try:
            buffer = render_itinerary_pdf(record)
        except Exception as e:
            logger.exception("PDF rendering failed for itinerary %s", record.pk)
            return error_response("Failed to generate PDF", [str(e)], status.HTTP_500_INTERNAL_SERVER_ERROR)
        return pdf_response(buffer, record.client_name)


@api_view(["POST"])
@permission_classes([tab_permission(TAB_CREATE_ITINERARY)])
def generate_itinerary(request):
    """
    POST /api/itineraries/generate/

    Renders the itinerary PDF of a package for a client and stores the
    matching customer record as a draft.
    """
    serializer = ItineraryGenerateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data
    package = data["package_id"]

    total_cost = data["total_cost"]
    if total_cost is None:
        total_cost = digits_to_int(package.price_min_inr) or digits_to_int(package.price_range_inr) or 0

    user = acting_user(request)
    record = CustomerItinerary(
        client_name=data["client_name"],
        client_email=data["client_email"],
        client_phone=data["client_phone"],
        package=package,
        package_name=package.destination_name,
        destination_name=package.destination_name,
        travel_date=data["travel_date"],
        adults=data["adults"],
        children=data["children"],
        total_cost=total_cost,
        advance_paid=data["advance_paid"],
        flights=data["flights"],
        hotels=data["hotels"],
        custom_itinerary=data["custom_itinerary"],
        notes=data["notes"],
        status=CustomerItinerary.STATUS_DRAFT,
        created_by=user,
    )
    record.add_history("Itinerary generated", f"PDF created for {record.client_name}", user)

    try:
        buffer = render_itinerary_pdf(record, package)
        record.save()
    except Exception as e:
        logger.exception("Itinerary generation failed for %s", record.client_name)
        return error_response("Failed to generate PDF", [str(e)], status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.info("Itinerary %s generated for %s by %s", record.pk, record.client_name, user)
    return pdf_response(buffer, record.client_name)


@api_view(["GET"])
@permission_classes([tab_permission(TAB_CREATE_ITINERARY)])
def packages_for_destination(request):
    """GET /api/itineraries/packages-for-destination/?destination=<name>"""
    destination = request.query_params.get("destination", "").strip()
    if not destination:
        return error_response("destination is required")
    packages = matching_packages(destination)
    return Response(PackageListSerializer(packages, many=True).data)
