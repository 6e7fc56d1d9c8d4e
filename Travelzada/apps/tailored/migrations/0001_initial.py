import uuid

import apps.tailored.models
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='TailoredLead',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('lead_id', models.UUIDField(default=uuid.uuid4, editable=False, unique=True)),
                ('status', models.CharField(choices=[('new', 'New'), ('contacted', 'Contacted'), ('converted', 'Converted')], default='new', max_length=20)),
                ('source', models.CharField(default='tailored_travel_wizard', max_length=50)),
                ('destinations', models.JSONField(blank=True, default=list)),
                ('date_range', models.CharField(blank=True, default='Flexible', max_length=100)),
                ('experiences', models.JSONField(blank=True, default=list)),
                ('route_items', models.JSONField(blank=True, default=list)),
                ('group_type', models.CharField(blank=True, default='', max_length=50)),
                ('inclusions', models.JSONField(blank=True, default=list)),
                ('hotel_types', models.JSONField(blank=True, default=list)),
                ('passengers', models.JSONField(blank=True, default=apps.tailored.models.default_passengers)),
                ('contact_name', models.CharField(max_length=150)),
                ('contact_phone', models.CharField(max_length=30)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Tailored lead',
                'verbose_name_plural': 'Tailored leads',
                'db_table': 'tailored_leads',
                'ordering': ['-created_at'],
            },
        ),
    ]
