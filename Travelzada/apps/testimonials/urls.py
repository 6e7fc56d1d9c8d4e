from django.urls import path
from rest_framework.urlpatterns import format_suffix_patterns
from .views import TestimonialViewSet

urlpatterns = [
    path('', TestimonialViewSet.as_view({'get': 'list', 'post': 'create'}), name='testimonial'),
    path('<int:pk>/', TestimonialViewSet.as_view({'get': 'retrieve', 'put': 'update', 'patch': 'partial_update', 'delete': 'destroy'}), name='testimonial-detail'),
    path('resumen/', TestimonialViewSet.as_view({'get': 'resumen'}), name='testimonial-resumen'),
    path('<int:pk>/toggle-featured/', TestimonialViewSet.as_view({'post': 'toggle_featured'}), name='testimonial-toggle-featured'),
]

urlpatterns = format_suffix_patterns(urlpatterns)
