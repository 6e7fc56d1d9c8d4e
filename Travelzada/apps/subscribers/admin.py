from django.contrib import admin
from .models import Subscriber


@admin.register(Subscriber)
class SubscriberAdmin(admin.ModelAdmin):
    list_display = ('id', 'email', 'status', 'source', 'created_at')
    list_filter = ('status', 'source')
    search_fields = ('email',)
