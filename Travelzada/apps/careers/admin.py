from django.contrib import admin
from .models import JobApplication, JobOpening


@admin.register(JobOpening)
class JobOpeningAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'department', 'location', 'type', 'status', 'created_at')
    list_filter = ('status', 'department', 'type')
    search_fields = ('title', 'department', 'location')


@admin.register(JobApplication)
class JobApplicationAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'email', 'position', 'status', 'read', 'created_at')
    list_filter = ('status', 'read', 'created_at')
    search_fields = ('name', 'email', 'position')
