from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='BlogPost',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=300)),
                ('subtitle', models.CharField(blank=True, default='', max_length=300)),
                ('description', models.TextField(blank=True, default='')),
                ('content', models.TextField(blank=True, default='')),
                ('blog_structure', models.JSONField(blank=True, default=list)),
                ('image', models.CharField(blank=True, default='', max_length=1000)),
                ('author', models.CharField(blank=True, default='', max_length=150)),
                ('date', models.DateField(blank=True, null=True)),
                ('category', models.CharField(blank=True, default='', max_length=100)),
                ('likes', models.PositiveIntegerField(default=0)),
                ('views', models.PositiveIntegerField(default=0)),
                ('comments', models.PositiveIntegerField(default=0)),
                ('shares', models.PositiveIntegerField(default=0)),
                ('featured', models.BooleanField(default=False)),
                ('published', models.BooleanField(default=False)),
                ('seo_title', models.CharField(blank=True, default='', max_length=300)),
                ('seo_description', models.TextField(blank=True, default='')),
                ('seo_keywords', models.TextField(blank=True, default='')),
                ('slug', models.SlugField(blank=True, max_length=320, unique=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Blog post',
                'verbose_name_plural': 'Blog posts',
                'db_table': 'blogs',
                'ordering': ['-created_at'],
            },
        ),
    ]
