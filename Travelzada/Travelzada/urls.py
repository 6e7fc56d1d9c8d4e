"""Travelzada URL Configuration

The admin site lives under ``admin/``; every REST endpoint is mounted by
``apps.api.urls`` under ``api/``.
"""
from django.contrib import admin
from django.urls import path
from django.conf.urls import include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('apps.api.urls')),
]
