import logging

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status, viewsets
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.filters import OrderingFilter
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from apps.api.pagination import StandardPagination
from apps.packages.serializers import PackageSerializer
from apps.users.models import TAB_LEADS
from apps.users.permissions import TabPermissionMixin
from . import wizard
from .filters import TailoredLeadFilter
from .matching import find_packages as rank_packages
from .models import TailoredLead
from .serializers import DestinationsStepSerializer, TailoredLeadSerializer

logger = logging.getLogger(__name__)


def payload_dict(request):
    return request.data if isinstance(request.data, dict) else {}


# -------------------- WIZARD --------------------
@api_view(["GET"])
@permission_classes([AllowAny])
def wizard_state(request):
    """GET /api/tailored/wizard/"""
    return Response(wizard.load_state(request.session))


@api_view(["POST"])
@permission_classes([AllowAny])
def wizard_step(request, step):
    """POST /api/tailored/wizard/step/<n>/"""
    try:
        state = wizard.apply_step(request.session, step, payload_dict(request))
    except wizard.WizardError as e:
        return Response({"success": False, "errors": e.errors}, status=status.HTTP_400_BAD_REQUEST)
    return Response(state)


@api_view(["POST"])
@permission_classes([AllowAny])
def wizard_back(request):
    return Response(wizard.go_back(request.session))


@api_view(["POST"])
@permission_classes([AllowAny])
def wizard_submit(request):
    """POST /api/tailored/wizard/submit/"""
    try:
        lead = wizard.submit(request.session, payload_dict(request))
    except wizard.WizardError as e:
        return Response({"success": False, "errors": e.errors}, status=status.HTTP_400_BAD_REQUEST)
    return Response(
        {
            "success": True,
            "message": "Your itinerary request has been submitted. Our team will contact you shortly on WhatsApp.",
            "lead": TailoredLeadSerializer(lead).data,
        },
        status=status.HTTP_201_CREATED
    )


@api_view(["POST"])
@permission_classes([AllowAny])
def find_packages(request):
    """
    POST /api/tailored/find-packages/

    Ranks the packages for the preferences in the body, or for the wizard
    state of the session when the body is empty.
    """
    preferences = payload_dict(request) or wizard.load_state(request.session)
    if not preferences.get("destinations"):
        return Response({"error": "No destinations provided."}, status=status.HTTP_400_BAD_REQUEST)

    serializer = DestinationsStepSerializer(data={"destinations": preferences.get("destinations")})
    if not serializer.is_valid():
        return Response(
            {"error": "Invalid destinations.", "errors": serializer.errors},
            status=status.HTTP_400_BAD_REQUEST
        )
    destinations = serializer.validated_data["destinations"]
    preferences = {**preferences, "destinations": destinations}

    results = []
    for package, score, reason in rank_packages(preferences):
        data = PackageSerializer(package).data
        data["matchScore"] = score
        data["matchReason"] = reason
        results.append(data)

    logger.info(
        "Tailored package search for %s: %s matches", ", ".join(map(str, destinations)), len(results)
    )
    return Response({"success": True, "packages": results})


# -------------------- VIEWSET --------------------
class TailoredLeadViewSet(TabPermissionMixin, viewsets.ModelViewSet):
    queryset = TailoredLead.objects.all().order_by("-created_at")
    serializer_class = TailoredLeadSerializer
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = TailoredLeadFilter
    ordering_fields = ["contact_name", "status", "created_at"]
    pagination_class = StandardPagination
    tab = TAB_LEADS

    # ----- EXTRA ENDPOINT: resumen -----
    @action(detail=False, methods=["get"], url_path="resumen", pagination_class=None)
    def resumen(self, request):
        data = [{"texto": "Total", "valor": str(TailoredLead.objects.count())}]
        for value, label in TailoredLead.STATUS_CHOICES:
            data.append({"texto": label, "valor": str(TailoredLead.objects.filter(status=value).count())})
        return Response(data)
