from django.urls import path
from rest_framework.urlpatterns import format_suffix_patterns
from .views import PackageViewSet

urlpatterns = [
    path('', PackageViewSet.as_view({'get': 'list', 'post': 'create'}), name='package'),
    path('<int:pk>/', PackageViewSet.as_view({'get': 'retrieve', 'put': 'update', 'patch': 'partial_update', 'delete': 'destroy'}), name='package-detail'),
    path('resumen/', PackageViewSet.as_view({'get': 'resumen'}), name='package-resumen'),
    path('todos/', PackageViewSet.as_view({'get': 'todos'}), name='package-todos'),
    path('existing-ids/', PackageViewSet.as_view({'get': 'existing_ids'}), name='package-existing-ids'),
    path('by-slug/<slug:slug>/', PackageViewSet.as_view({'get': 'by_slug'}), name='package-by-slug'),
    path('bulk-import/', PackageViewSet.as_view({'post': 'bulk_import'}), name='package-bulk-import'),
    path('excel/preview/', PackageViewSet.as_view({'post': 'excel_preview'}), name='package-excel-preview'),
    path('excel/import/', PackageViewSet.as_view({'post': 'excel_import'}), name='package-excel-import'),
    path('excel/template/', PackageViewSet.as_view({'get': 'excel_template'}), name='package-excel-template'),
]

urlpatterns = format_suffix_patterns(urlpatterns)
