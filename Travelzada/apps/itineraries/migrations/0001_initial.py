import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('packages', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='CustomerItinerary',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('client_name', models.CharField(max_length=150)),
                ('client_email', models.EmailField(blank=True, default='', max_length=254)),
                ('client_phone', models.CharField(blank=True, default='', max_length=30)),
                ('package_name', models.CharField(blank=True, default='', max_length=300)),
                ('destination_name', models.CharField(blank=True, default='', max_length=300)),
                ('travel_date', models.DateField(blank=True, null=True)),
                ('adults', models.PositiveIntegerField(default=2)),
                ('children', models.PositiveIntegerField(default=0)),
                ('total_cost', models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ('advance_paid', models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ('balance_due', models.DecimalField(decimal_places=2, default=0, editable=False, max_digits=12)),
                ('flights', models.JSONField(blank=True, default=list)),
                ('hotels', models.JSONField(blank=True, default=list)),
                ('custom_itinerary', models.JSONField(blank=True, default=list)),
                ('notes', models.TextField(blank=True, default='')),
                ('customer_review', models.TextField(blank=True, default='')),
                ('status', models.CharField(choices=[('draft', 'Draft'), ('sent', 'Sent'), ('confirmed', 'Confirmed'), ('completed', 'Completed'), ('cancelled', 'Cancelled')], default='draft', max_length=20)),
                ('history', models.JSONField(blank=True, default=list)),
                ('created_by', models.CharField(blank=True, default='admin', max_length=254)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('package', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='itineraries', to='packages.package')),
            ],
            options={
                'verbose_name': 'Customer itinerary',
                'verbose_name_plural': 'Customer itineraries',
                'db_table': 'customer_itineraries',
                'ordering': ['-created_at'],
            },
        ),
    ]
