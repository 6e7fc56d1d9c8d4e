from django.urls import path
from rest_framework.urlpatterns import format_suffix_patterns

from . import views
from . import reportes_views

urlpatterns = [
    path('resumen-general/', views.resumen_general, name='dashboard-resumen-general'),

    # Report exports
    path('reportes/leads/exportar-pdf/', reportes_views.exportar_leads_pdf, name='dashboard-leads-exportar-pdf'),
    path('reportes/leads/exportar-excel/', reportes_views.exportar_leads_excel, name='dashboard-leads-exportar-excel'),
]

urlpatterns = format_suffix_patterns(urlpatterns)
