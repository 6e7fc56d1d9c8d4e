from django.urls import path
from rest_framework.urlpatterns import format_suffix_patterns
from .views import BlogPostViewSet

urlpatterns = [
    path('', BlogPostViewSet.as_view({'get': 'list', 'post': 'create'}), name='blog'),
    path('<int:pk>/', BlogPostViewSet.as_view({'get': 'retrieve', 'put': 'update', 'patch': 'partial_update', 'delete': 'destroy'}), name='blog-detail'),
    path('resumen/', BlogPostViewSet.as_view({'get': 'resumen'}), name='blog-resumen'),
    path('by-slug/<slug:slug>/', BlogPostViewSet.as_view({'get': 'by_slug'}), name='blog-by-slug'),
    path('<int:pk>/view/', BlogPostViewSet.as_view({'post': 'register_view'}), name='blog-view'),
    path('<int:pk>/like/', BlogPostViewSet.as_view({'post': 'like'}), name='blog-like'),
    path('<int:pk>/toggle-published/', BlogPostViewSet.as_view({'post': 'toggle_published'}), name='blog-toggle-published'),
]

urlpatterns = format_suffix_patterns(urlpatterns)
