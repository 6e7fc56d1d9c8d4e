from django.contrib import admin
from .models import Package


@admin.register(Package)
class PackageAdmin(admin.ModelAdmin):
    list_display = (
        'id',
        'destination_id',
        'destination_name',
        'duration',
        'price_range_inr',
        'travel_type',
        'budget_category',
        'created_by',
        'last_updated',
    )
    list_filter = (
        'travel_type',
        'budget_category',
        'star_category',
        'last_updated',
    )
    search_fields = (
        'destination_id',
        'destination_name',
        'overview',
        'slug',
    )
    readonly_fields = ('created_at', 'updated_at')
    ordering = ('-last_updated', '-created_at')
    fieldsets = (
        (None, {'fields': ('destination_id', 'destination_name', 'country', 'overview', 'slug')}),
        ('Duration and price', {'fields': (
            'duration', 'duration_nights', 'duration_days',
            'price_range_inr', 'price_min_inr', 'price_max_inr', 'currency',
        )}),
        ('Classification', {'fields': (
            'mood', 'occasion', 'travel_type', 'budget_category', 'theme', 'adventure_level',
            'stay_type', 'star_category', 'meal_plan', 'group_size', 'child_friendly',
            'elderly_friendly', 'language_preference', 'seasonality', 'hotel_examples', 'rating',
            'location_breakup', 'airport_code', 'transfer_type', 'climate_type', 'safety_score',
            'sustainability_score', 'ideal_traveler_persona',
        )}),
        ('Content', {'fields': (
            'inclusions', 'exclusions', 'day_wise_itinerary', 'highlights',
            'day_wise_itinerary_details', 'guest_reviews', 'booking_policies',
            'faq_items', 'why_book_with_us',
        )}),
        ('Media and SEO', {'fields': (
            'primary_image_url', 'image_alt_text', 'booking_url',
            'seo_title', 'seo_description', 'seo_keywords', 'meta_image_url',
        )}),
        ('Audit', {'fields': ('created_by', 'last_updated', 'created_at', 'updated_at')}),
    )
