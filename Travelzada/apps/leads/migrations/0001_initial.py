from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Lead',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=150)),
                ('mobile', models.CharField(max_length=10)),
                ('email', models.EmailField(blank=True, default='', max_length=254)),
                ('source_url', models.CharField(blank=True, default='', max_length=1000)),
                ('package_name', models.CharField(blank=True, default='', max_length=300)),
                ('status', models.CharField(choices=[('new', 'New'), ('contacted', 'Contacted'), ('converted', 'Converted'), ('lost', 'Lost')], default='new', max_length=20)),
                ('read', models.BooleanField(default=False)),
                ('destination', models.CharField(blank=True, default='', max_length=200)),
                ('travel_date', models.DateField(blank=True, null=True)),
                ('travelers_count', models.PositiveIntegerField(blank=True, null=True)),
                ('travel_type', models.CharField(blank=True, default='', max_length=100)),
                ('budget', models.CharField(blank=True, default='', max_length=100)),
                ('notes', models.TextField(blank=True, default='')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Lead',
                'verbose_name_plural': 'Leads',
                'db_table': 'leads',
                'ordering': ['-created_at'],
            },
        ),
    ]
