from django.urls import path
from rest_framework.urlpatterns import format_suffix_patterns
from .views import SubscriberViewSet

urlpatterns = [
    path('', SubscriberViewSet.as_view({'get': 'list', 'post': 'create'}), name='subscriber'),
    path('<int:pk>/', SubscriberViewSet.as_view({'get': 'retrieve', 'delete': 'destroy'}), name='subscriber-detail'),
    path('resumen/', SubscriberViewSet.as_view({'get': 'resumen'}), name='subscriber-resumen'),
    path('<int:pk>/toggle-status/', SubscriberViewSet.as_view({'post': 'toggle_status'}), name='subscriber-toggle-status'),
]

urlpatterns = format_suffix_patterns(urlpatterns)
