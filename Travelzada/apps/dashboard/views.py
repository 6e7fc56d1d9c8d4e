"""
Dashboard views.
Counters and recent activity for the home screen of the admin panel.
"""
from datetime import timedelta

from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from apps.blogs.models import BlogPost
from apps.careers.models import JobApplication
from apps.contacts.models import ContactMessage
from apps.itineraries.models import CustomerItinerary
from apps.leads.models import Lead
from apps.leads.serializers import LeadSerializer
from apps.packages.models import Package
from apps.packages.serializers import PackageListSerializer
from apps.subscribers.models import Subscriber
from apps.users.models import TAB_DASHBOARD
from apps.users.permissions import tab_permission

RECENT_LIMIT = 5


@api_view(['GET'])
@permission_classes([tab_permission(TAB_DASHBOARD)])
def resumen_general(request):
    """
    GET /api/dashboard/resumen-general/

    Totals per section plus the latest packages and leads.
    """
    week_ago = timezone.now() - timedelta(days=7)

    totals = {
        "packages": Package.objects.count(),
        "leads": Lead.objects.count(),
        "unreadLeads": Lead.objects.filter(read=False).count(),
        "leadsThisWeek": Lead.objects.filter(created_at__gte=week_ago).count(),
        "users": get_user_model().objects.count(),
        "subscribers": Subscriber.objects.count(),
        "blogs": BlogPost.objects.count(),
        "contacts": ContactMessage.objects.count(),
        "applications": JobApplication.objects.count(),
        "itineraries": CustomerItinerary.objects.count(),
    }

    recent_packages = Package.objects.order_by("-created_at")[:RECENT_LIMIT]
    recent_leads = Lead.objects.order_by("-created_at")[:RECENT_LIMIT]

    return Response({
        "totals": totals,
        "recentPackages": PackageListSerializer(recent_packages, many=True).data,
        "recentLeads": LeadSerializer(recent_leads, many=True).data,
        "generatedAt": timezone.now().isoformat(),
    })
