from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from .views import LoginTokenView

urlpatterns = [
    path('', LoginTokenView.as_view(), name='login_token'),
    path('refresh/', TokenRefreshView.as_view(), name='login_token_refresh'),
]
