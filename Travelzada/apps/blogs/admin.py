from django.contrib import admin
from .models import BlogPost


@admin.register(BlogPost)
class BlogPostAdmin(admin.ModelAdmin):
    list_display = (
        'id',
        'title',
        'category',
        'author',
        'published',
        'featured',
        'views',
        'likes',
        'created_at',
    )
    list_filter = ('published', 'featured', 'category', 'created_at')
    search_fields = ('title', 'description', 'author')
    prepopulated_fields = {'slug': ('title',)}
    readonly_fields = ('views', 'likes', 'comments', 'shares', 'created_at', 'updated_at')
