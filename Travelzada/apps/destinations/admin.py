from django.contrib import admin
from .models import Destination


@admin.register(Destination)
class DestinationAdmin(admin.ModelAdmin):
    list_display = (
        'id',
        'name',
        'country',
        'region',
        'featured',
        'rating',
        'created_at',
    )
    list_filter = (
        'region',
        'featured',
        'created_at',
    )
    search_fields = (
        'name',
        'country',
        'description',
    )
    prepopulated_fields = {'slug': ('name',)}
    readonly_fields = ('created_at', 'updated_at')
