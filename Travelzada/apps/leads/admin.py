from django.contrib import admin
from .models import Lead


@admin.register(Lead)
class LeadAdmin(admin.ModelAdmin):
    list_display = (
        'id',
        'name',
        'mobile',
        'email',
        'package_name',
        'status',
        'read',
        'created_at',
    )
    list_filter = ('status', 'read', 'created_at')
    search_fields = ('name', 'mobile', 'email', 'package_name', 'destination')
    readonly_fields = ('created_at', 'updated_at')
