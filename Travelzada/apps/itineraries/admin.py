from django.contrib import admin
from .models import CustomerItinerary


@admin.register(CustomerItinerary)
class CustomerItineraryAdmin(admin.ModelAdmin):
    list_display = (
        'id',
        'client_name',
        'package_name',
        'travel_date',
        'total_cost',
        'advance_paid',
        'balance_due',
        'status',
        'created_at',
    )
    list_filter = ('status', 'travel_date')
    search_fields = ('client_name', 'client_email', 'client_phone', 'package_name')
    readonly_fields = ('balance_due', 'history', 'created_by', 'created_at', 'updated_at')
