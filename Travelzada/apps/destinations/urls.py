from django.urls import path
from rest_framework.urlpatterns import format_suffix_patterns
from .views import DestinationViewSet

urlpatterns = [
    path('', DestinationViewSet.as_view({'get': 'list', 'post': 'create'}), name='destination'),
    path('<int:pk>/', DestinationViewSet.as_view({'get': 'retrieve', 'put': 'update', 'patch': 'partial_update', 'delete': 'destroy'}), name='destination-detail'),
    path('resumen/', DestinationViewSet.as_view({'get': 'resumen'}), name='destination-resumen'),
    path('todos/', DestinationViewSet.as_view({'get': 'todos'}), name='destination-todos'),
    path('by-slug/<slug:slug>/', DestinationViewSet.as_view({'get': 'by_slug'}), name='destination-by-slug'),
]

urlpatterns = format_suffix_patterns(urlpatterns)
