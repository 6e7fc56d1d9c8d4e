from django.contrib import admin
from .models import Testimonial


@admin.register(Testimonial)
class TestimonialAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'rating', 'featured', 'created_at')
    list_filter = ('rating', 'featured')
    search_fields = ('name', 'quote')
