from django.urls import path
from rest_framework.urlpatterns import format_suffix_patterns
from .views import LeadViewSet

urlpatterns = [
    path('', LeadViewSet.as_view({'get': 'list', 'post': 'create'}), name='lead'),
    path('<int:pk>/', LeadViewSet.as_view({'get': 'retrieve', 'put': 'update', 'patch': 'partial_update', 'delete': 'destroy'}), name='lead-detail'),
    path('resumen/', LeadViewSet.as_view({'get': 'resumen'}), name='lead-resumen'),
    path('<int:pk>/toggle-status/', LeadViewSet.as_view({'post': 'toggle_status'}), name='lead-toggle-status'),
    path('<int:pk>/mark-viewed/', LeadViewSet.as_view({'post': 'mark_viewed'}), name='lead-mark-viewed'),
]

urlpatterns = format_suffix_patterns(urlpatterns)
