import apps.packages.models
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Package',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('destination_id', models.CharField(db_index=True, max_length=100)),
                ('destination_name', models.CharField(max_length=200)),
                ('country', models.CharField(blank=True, default='', max_length=100)),
                ('overview', models.TextField(blank=True, default='')),
                ('duration', models.CharField(blank=True, default='', max_length=100)),
                ('duration_nights', models.PositiveIntegerField(blank=True, null=True)),
                ('duration_days', models.PositiveIntegerField(blank=True, null=True)),
                ('mood', models.CharField(blank=True, default='', max_length=200)),
                ('occasion', models.CharField(blank=True, default='', max_length=200)),
                ('travel_type', models.CharField(blank=True, default='', max_length=200)),
                ('budget_category', models.CharField(blank=True, default='', max_length=100)),
                ('theme', models.CharField(blank=True, default='', max_length=200)),
                ('adventure_level', models.CharField(blank=True, default='', max_length=100)),
                ('stay_type', models.CharField(blank=True, default='', max_length=200)),
                ('star_category', models.CharField(blank=True, default='', max_length=100)),
                ('meal_plan', models.CharField(blank=True, default='', max_length=200)),
                ('group_size', models.CharField(blank=True, default='', max_length=100)),
                ('child_friendly', models.CharField(blank=True, default='', max_length=100)),
                ('elderly_friendly', models.CharField(blank=True, default='', max_length=100)),
                ('language_preference', models.CharField(blank=True, default='', max_length=200)),
                ('seasonality', models.CharField(blank=True, default='', max_length=200)),
                ('hotel_examples', models.TextField(blank=True, default='')),
                ('rating', models.CharField(blank=True, default='', max_length=50)),
                ('location_breakup', models.TextField(blank=True, default='')),
                ('airport_code', models.CharField(blank=True, default='', max_length=50)),
                ('transfer_type', models.CharField(blank=True, default='', max_length=100)),
                ('currency', models.CharField(blank=True, default='INR', max_length=10)),
                ('climate_type', models.CharField(blank=True, default='', max_length=100)),
                ('safety_score', models.CharField(blank=True, default='', max_length=50)),
                ('sustainability_score', models.CharField(blank=True, default='', max_length=50)),
                ('ideal_traveler_persona', models.TextField(blank=True, default='')),
                ('price_range_inr', models.CharField(blank=True, default='', max_length=100)),
                ('price_min_inr', models.PositiveIntegerField(blank=True, null=True)),
                ('price_max_inr', models.PositiveIntegerField(blank=True, null=True)),
                ('inclusions', models.TextField(blank=True, default='')),
                ('exclusions', models.TextField(blank=True, default='')),
                ('day_wise_itinerary', models.TextField(blank=True, default='', help_text="Itinerary as text: 'Day 1: ... | Day 2: ...'")),
                ('highlights', models.JSONField(blank=True, default=list)),
                ('day_wise_itinerary_details', models.JSONField(blank=True, default=list, help_text='List of {day, title, description}')),
                ('guest_reviews', models.JSONField(blank=True, default=list)),
                ('booking_policies', models.JSONField(blank=True, default=apps.packages.models.empty_booking_policies)),
                ('faq_items', models.JSONField(blank=True, default=list)),
                ('why_book_with_us', models.JSONField(blank=True, default=list)),
                ('primary_image_url', models.CharField(blank=True, default='', max_length=1000)),
                ('image_alt_text', models.CharField(blank=True, default='', max_length=300)),
                ('booking_url', models.CharField(blank=True, default='', max_length=1000)),
                ('slug', models.SlugField(blank=True, default='', max_length=200)),
                ('seo_title', models.CharField(blank=True, default='', max_length=300)),
                ('seo_description', models.TextField(blank=True, default='')),
                ('seo_keywords', models.TextField(blank=True, default='')),
                ('meta_image_url', models.CharField(blank=True, default='', max_length=1000)),
                ('created_by', models.CharField(blank=True, default='', max_length=254)),
                ('last_updated', models.DateField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Package',
                'verbose_name_plural': 'Packages',
                'db_table': 'packages',
                'ordering': ['-last_updated', '-created_at'],
            },
        ),
    ]
