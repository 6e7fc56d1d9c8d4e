import logging

from django.http import HttpResponse
from django.shortcuts import get_object_or_404
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status, viewsets
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.filters import OrderingFilter
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response

from apps.api.pagination import StandardPagination
from apps.api.responses import error_response
from apps.users.models import TAB_AI_GENERATOR, TAB_PACKAGES
from apps.users.permissions import TabPermissionMixin, tab_permission
from .excel import (
    TEMPLATE_FILENAME,
    ExcelImportError,
    build_template_workbook,
    load_package_workbook,
    prepare_import,
)
from .filters import PackageFilter
from .generator import generate_packages as complete_packages
from .models import Package
from .serializers import PackageListSerializer, PackageSerializer
from .services import bulk_import_json, existing_package_ids, import_packages

logger = logging.getLogger(__name__)


# -------------------- VIEWSET --------------------
class PackageViewSet(TabPermissionMixin, viewsets.ModelViewSet):
    """
    Packages, with:
    - Public list, detail and lookup by slug
    - Filtering by destination, travel type and free text
    - Endpoints extra: resumen, todos, existing-ids
    - Imports: JSON array, Excel preview and Excel import, Excel template
    """

    parser_classes = (JSONParser, MultiPartParser, FormParser)

    queryset = Package.objects.all().order_by("-last_updated", "-created_at")
    serializer_class = PackageSerializer
    pagination_class = StandardPagination
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = PackageFilter
    ordering_fields = ["destination_name", "duration_days", "price_min_inr", "travel_type", "last_updated", "created_at"]
    tab = TAB_PACKAGES
    public_actions = ("list", "retrieve", "by_slug")

    def perform_create(self, serializer):
        user = self.request.user
        serializer.save(created_by=serializer.validated_data.get("created_by") or user.email)

    # ----- EXTRA ENDPOINT: resumen -----
    @action(detail=False, methods=["get"], url_path="resumen", pagination_class=None)
    def resumen(self, request):
        total = Package.objects.count()
        destinations = Package.objects.values("destination_name").distinct().count()
        by_budget = {
            category: Package.objects.filter(budget_category__iexact=category).count()
            for category in ("Budget", "Mid", "Premium")
        }
        ai_generated = Package.objects.filter(created_by="AI Generator").count()

        data = [
            {"texto": "Total", "valor": str(total)},
            {"texto": "Destinations", "valor": str(destinations)},
            {"texto": "Budget", "valor": str(by_budget["Budget"])},
            {"texto": "Mid", "valor": str(by_budget["Mid"])},
            {"texto": "Premium", "valor": str(by_budget["Premium"])},
            {"texto": "AI Generated", "valor": str(ai_generated)},
        ]
        return Response(data)

    # ----- EXTRA ENDPOINT: todos -----
    @action(detail=False, methods=["get"], url_path="todos", pagination_class=None)
    def todos(self, request):
        queryset = self.filter_queryset(self.get_queryset())
        return Response(PackageListSerializer(queryset, many=True).data)

    @action(detail=False, methods=["get"], url_path="existing-ids", pagination_class=None)
    def existing_ids(self, request):
        return Response(sorted(existing_package_ids()))

    @action(detail=False, methods=["get"], url_path=r"by-slug/(?P<slug>[-\w]+)", pagination_class=None)
    def by_slug(self, request, slug=None):
        package = Package.objects.filter(slug=slug).order_by("-last_updated", "-created_at").first()
        if package is None:
            package = get_object_or_404(Package, destination_id__iexact=slug)
        return Response(PackageSerializer(package).data)

    @action(detail=False, methods=["post"], url_path="bulk-import")
    def bulk_import(self, request):
        try:
            result = bulk_import_json(request.data)
        except ValueError as e:
            return error_response(str(e))
        except Exception as e:
            logger.exception("Bulk JSON import failed")
            return error_response("Bulk import failed", [str(e)], status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({"success": True, **result})

    @action(detail=False, methods=["post"], url_path="excel/preview")
    def excel_preview(self, request):
        upload = request.FILES.get("file")
        if upload is None:
            return error_response("No file uploaded")

        try:
            sheets = load_package_workbook(upload, upload.name)
            preview = prepare_import(sheets, existing_package_ids())
        except ExcelImportError as e:
            return error_response(str(e))
        except Exception as e:
            logger.exception("Excel preview failed for %s", upload.name)
            return error_response("Could not process the Excel file", [str(e)], status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({"success": True, **preview})

    @action(detail=False, methods=["post"], url_path="excel/import")
    def excel_import(self, request):
        """
        Imports the new packages of an uploaded workbook, or a ``packages``
        list already prepared by the preview or the AI generator.
        """
        upload = request.FILES.get("file")
        created_by = request.user.email

        try:
            if upload is not None:
                sheets = load_package_workbook(upload, upload.name)
                items = prepare_import(sheets, existing_package_ids())["packages"]
            else:
                items = request.data.get("packages")
                if not isinstance(items, list) or not items:
                    return error_response("No packages provided")
                if all(isinstance(item, dict) and item.get("Created_By") == "AI Generator" for item in items):
                    created_by = "AI Generator"

            items = [item for item in items if isinstance(item, dict) and not item.get("_error")]
            result = import_packages(items, created_by)
        except ExcelImportError as e:
            return error_response(str(e))
        except Exception as e:
            logger.exception("Excel import failed")
            return error_response("Import failed", [str(e)], status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({"success": True, **result})

    @action(detail=False, methods=["get"], url_path="excel/template", pagination_class=None)
    def excel_template(self, request):
        buffer = build_template_workbook()
        response = HttpResponse(
            buffer.getvalue(),
            content_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        )
        response["Content-Disposition"] = f'attachment; filename="{TEMPLATE_FILENAME}"'
        return response


@api_view(["POST"])
@permission_classes([tab_permission(TAB_AI_GENERATOR)])
def generate_packages(request):
    """
    POST /api/generate-packages

    Completes package skeletons with the AI model. Body: ``{"packages": [...]}``.
    """
    packages = request.data.get("packages") if isinstance(request.data, dict) else None
    if not packages or not isinstance(packages, list):
        return Response({"error": "No packages provided"}, status=status.HTTP_400_BAD_REQUEST)

    try:
        results, generated, errors = complete_packages(packages)
    except Exception as e:
        logger.exception("Error in generate-packages")
        return Response({"error": str(e) or "Internal server error"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.info("Generated %s packages, %s errors", generated, errors)
    return Response({
        "success": True,
        "packages": results,
        "generated": generated,
        "errors": errors,
    })
