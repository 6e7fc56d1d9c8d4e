from django.apps import AppConfig


class TailoredConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.tailored'
    verbose_name = 'Tailored travel'
