from django.urls import path
from rest_framework.urlpatterns import format_suffix_patterns
from .views import UserViewSet

urlpatterns = [
    path('', UserViewSet.as_view({'get': 'list', 'post': 'create'}), name='user'),
    path('<int:pk>/', UserViewSet.as_view({'get': 'retrieve', 'put': 'update', 'patch': 'partial_update', 'delete': 'destroy'}), name='user-detail'),
    path('resumen/', UserViewSet.as_view({'get': 'resumen'}), name='user-resumen'),
    path('signup/', UserViewSet.as_view({'post': 'signup'}), name='user-signup'),
    path('me/', UserViewSet.as_view({'get': 'me'}), name='user-me'),
    path('<int:pk>/toggle-role/', UserViewSet.as_view({'post': 'toggle_role'}), name='user-toggle-role'),
    path('<int:pk>/toggle-active/', UserViewSet.as_view({'post': 'toggle_active'}), name='user-toggle-active'),
    path('<int:pk>/permissions/', UserViewSet.as_view({'post': 'set_permissions'}), name='user-permissions'),
]

urlpatterns = format_suffix_patterns(urlpatterns)
