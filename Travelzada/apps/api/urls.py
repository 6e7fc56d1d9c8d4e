from django.urls import path, include

from apps.packages.views import generate_packages

urlpatterns = [
    path('login/', include('apps.login_token.urls')),
    path('users/', include('apps.users.urls')),
    path('packages/', include('apps.packages.urls')),
    path('generate-packages', generate_packages, name='generate-packages'),
    path('generate-packages/', generate_packages),
    path('destinations/', include('apps.destinations.urls')),
    path('blogs/', include('apps.blogs.urls')),
    path('leads/', include('apps.leads.urls')),
    path('contacts/', include('apps.contacts.urls')),
    path('careers/', include('apps.careers.urls')),
    path('subscribers/', include('apps.subscribers.urls')),
    path('testimonials/', include('apps.testimonials.urls')),
    path('itineraries/', include('apps.itineraries.urls')),
    path('tailored/', include('apps.tailored.urls')),
    path('dashboard/', include('apps.dashboard.urls')),
]
