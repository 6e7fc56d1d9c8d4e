from django.urls import path
from rest_framework.urlpatterns import format_suffix_patterns
from .views import CustomerItineraryViewSet, generate_itinerary, packages_for_destination

urlpatterns = [
    path('', CustomerItineraryViewSet.as_view({'get': 'list', 'post': 'create'}), name='itinerary'),
    path('<int:pk>/', CustomerItineraryViewSet.as_view({'get': 'retrieve', 'put': 'update', 'patch': 'partial_update', 'delete': 'destroy'}), name='itinerary-detail'),
    path('stats/', CustomerItineraryViewSet.as_view({'get': 'stats'}), name='itinerary-stats'),
    path('<int:pk>/change-status/', CustomerItineraryViewSet.as_view({'post': 'change_status'}), name='itinerary-change-status'),
    path('<int:pk>/add-note/', CustomerItineraryViewSet.as_view({'post': 'add_note'}), name='itinerary-add-note'),
    path('<int:pk>/pdf/', CustomerItineraryViewSet.as_view({'get': 'pdf'}), name='itinerary-pdf'),
    path('generate/', generate_itinerary, name='itinerary-generate'),
    path('packages-for-destination/', packages_for_destination, name='itinerary-packages-for-destination'),
]

urlpatterns = format_suffix_patterns(urlpatterns)
