from django.contrib import admin
from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = (
        'id',
        'email',
        'display_name',
        'role',
        'is_active',
        'last_login',
        'created_at',
    )
    list_filter = ('role', 'is_active', 'is_staff', 'created_at')
    search_fields = ('email', 'display_name', 'username')
    readonly_fields = ('password', 'created_at', 'updated_at', 'last_login')
    ordering = ('-created_at',)
    fieldsets = (
        (None, {'fields': ('email', 'username', 'password')}),
        ('Profile', {'fields': ('display_name', 'photo_url')}),
        ('Access', {'fields': ('role', 'permissions', 'is_active', 'is_staff', 'is_superuser')}),
        ('Dates', {'fields': ('last_login', 'created_at', 'updated_at')}),
    )
