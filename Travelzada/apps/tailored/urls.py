from django.urls import path
from rest_framework.urlpatterns import format_suffix_patterns
from .views import (
    TailoredLeadViewSet,
    find_packages,
    wizard_back,
    wizard_state,
    wizard_step,
    wizard_submit,
)

urlpatterns = [
    path('wizard/', wizard_state, name='tailored-wizard'),
    path('wizard/step/<int:step>/', wizard_step, name='tailored-wizard-step'),
    path('wizard/back/', wizard_back, name='tailored-wizard-back'),
    path('wizard/submit/', wizard_submit, name='tailored-wizard-submit'),
    path('find-packages/', find_packages, name='tailored-find-packages'),
    path('leads/', TailoredLeadViewSet.as_view({'get': 'list'}), name='tailored-lead'),
    path('leads/<int:pk>/', TailoredLeadViewSet.as_view({'get': 'retrieve', 'put': 'update', 'patch': 'partial_update', 'delete': 'destroy'}), name='tailored-lead-detail'),
    path('leads/resumen/', TailoredLeadViewSet.as_view({'get': 'resumen'}), name='tailored-lead-resumen'),
]

urlpatterns = format_suffix_patterns(urlpatterns)
