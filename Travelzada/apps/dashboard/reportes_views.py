"""
Report export endpoints (PDF and Excel).
"""
import logging
from datetime import datetime

from django.http import HttpResponse
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes

from apps.api.responses import error_response
from apps.leads.filters import LeadFilter
from apps.leads.models import Lead
from apps.users.models import TAB_LEADS
from apps.users.permissions import tab_permission
from .reports import build_leads_excel, build_leads_pdf

logger = logging.getLogger(__name__)

EXCEL_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
MAX_ROWS = 5000
FILTER_PARAMS = ('status', 'read', 'search', 'date', 'created_from', 'created_to')


def filtered_leads(request):
    """Leads matching the same query parameters as the lead list."""
    filterset = LeadFilter(request.query_params, queryset=Lead.objects.all().order_by('-created_at'))
    if not filterset.is_valid():
        return None, filterset.errors
    return filterset.qs[:MAX_ROWS], None


def applied_filters(request):
    return {key: request.query_params.get(key) for key in FILTER_PARAMS}


def attachment(content, content_type, extension):
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    response = HttpResponse(content, content_type=content_type)
    response['Content-Disposition'] = f'attachment; filename="leads_{timestamp}.{extension}"'
    return response


@api_view(['GET'])
@permission_classes([tab_permission(TAB_LEADS)])
def exportar_leads_pdf(request):
    """
    GET /api/dashboard/reportes/leads/exportar-pdf/

    Accepts the lead list filters (status, read, search, date, created_from, created_to).
    """
    leads, errors = filtered_leads(request)
    if errors:
        return error_response("Invalid filters", errors)

    try:
        pdf_buffer = build_leads_pdf(leads, applied_filters(request))
    except Exception as e:
        logger.exception("Lead PDF export failed")
        return error_response("Error exporting leads to PDF", [str(e)], status.HTTP_500_INTERNAL_SERVER_ERROR)

    return attachment(pdf_buffer.getvalue(), 'application/pdf', 'pdf')


@api_view(['GET'])
@permission_classes([tab_permission(TAB_LEADS)])
def exportar_leads_excel(request):
    """
    GET /api/dashboard/reportes/leads/exportar-excel/
    """
    leads, errors = filtered_leads(request)
    if errors:
        return error_response("Invalid filters", errors)

    try:
        excel_buffer = build_leads_excel(leads, applied_filters(request))
    except Exception as e:
        logger.exception("Lead Excel export failed")
        return error_response("Error exporting leads to Excel", [str(e)], status.HTTP_500_INTERNAL_SERVER_ERROR)

    return attachment(excel_buffer.getvalue(), EXCEL_CONTENT_TYPE, 'xlsx')
