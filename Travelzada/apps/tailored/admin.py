from django.contrib import admin
from .models import TailoredLead


@admin.register(TailoredLead)
class TailoredLeadAdmin(admin.ModelAdmin):
    list_display = ('id', 'contact_name', 'contact_phone', 'group_type', 'status', 'created_at')
    list_filter = ('status', 'group_type')
    search_fields = ('contact_name', 'contact_phone')
    readonly_fields = ('lead_id', 'source', 'created_at', 'updated_at')
