from django.urls import path
from rest_framework.urlpatterns import format_suffix_patterns
from .views import ContactMessageViewSet

urlpatterns = [
    path('', ContactMessageViewSet.as_view({'get': 'list', 'post': 'create'}), name='contact'),
    path('<int:pk>/', ContactMessageViewSet.as_view({'get': 'retrieve', 'put': 'update', 'patch': 'partial_update', 'delete': 'destroy'}), name='contact-detail'),
    path('resumen/', ContactMessageViewSet.as_view({'get': 'resumen'}), name='contact-resumen'),
    path('<int:pk>/mark-read/', ContactMessageViewSet.as_view({'post': 'mark_read'}), name='contact-mark-read'),
]

urlpatterns = format_suffix_patterns(urlpatterns)
