from django.apps import AppConfig


class TestimonialsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.testimonials'
    verbose_name = 'Testimonials'
