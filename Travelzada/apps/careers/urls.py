from django.urls import path
from rest_framework.urlpatterns import format_suffix_patterns
from .views import JobApplicationViewSet, JobOpeningViewSet

urlpatterns = [
    path('jobs/', JobOpeningViewSet.as_view({'get': 'list', 'post': 'create'}), name='job'),
    path('jobs/<int:pk>/', JobOpeningViewSet.as_view({'get': 'retrieve', 'put': 'update', 'patch': 'partial_update', 'delete': 'destroy'}), name='job-detail'),
    path('applications/', JobApplicationViewSet.as_view({'get': 'list', 'post': 'create'}), name='application'),
    path('applications/<int:pk>/', JobApplicationViewSet.as_view({'get': 'retrieve', 'put': 'update', 'patch': 'partial_update', 'delete': 'destroy'}), name='application-detail'),
    path('applications/resumen/', JobApplicationViewSet.as_view({'get': 'resumen'}), name='application-resumen'),
    path('applications/<int:pk>/mark-reviewed/', JobApplicationViewSet.as_view({'post': 'mark_reviewed'}), name='application-mark-reviewed'),
]

urlpatterns = format_suffix_patterns(urlpatterns)
