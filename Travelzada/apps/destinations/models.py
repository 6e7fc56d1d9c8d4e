from django.db import models
from django.utils.text import slugify


class Destination(models.Model):
    """
    Destination page shown on the public site.

    ``package_ids`` lists the ``Destination_ID`` of the packages pinned to the
    page; packages whose name or ID prefix matches are shown as well.
    """

    REGION_INDIA = 'India'
    REGION_INTERNATIONAL = 'International'
    REGION_CHOICES = [
        (REGION_INDIA, 'India'),
        (REGION_INTERNATIONAL, 'International'),
    ]

    name = models.CharField(max_length=150)
    country = models.CharField(max_length=100, blank=True, default='')
    region = models.CharField(max_length=20, choices=REGION_CHOICES, default=REGION_INTERNATIONAL)
    description = models.TextField(blank=True, default='')
    image = models.CharField(max_length=1000, blank=True, default='')
    slug = models.SlugField(max_length=160, unique=True, blank=True)
    featured = models.BooleanField(default=False)
    rating = models.DecimalField(max_digits=2, decimal_places=1, null=True, blank=True)
    package_ids = models.JSONField(default=list, blank=True)
    best_time_to_visit = models.CharField(max_length=200, blank=True, default='')
    highlights = models.JSONField(default=list, blank=True)
    activities = models.JSONField(default=list, blank=True)
    budget_range = models.CharField(max_length=100, blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Destination"
        verbose_name_plural = "Destinations"
        db_table = "destinations"
        ordering = ["name"]

    def __str__(self):
        return f"{self.name} ({self.country})" if self.country else self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            base = slugify(self.name) or 'destination'
            slug = base
            suffix = 2
            while Destination.objects.filter(slug=slug).exclude(pk=self.pk).exists():
                slug = f"{base}-{suffix}"
                suffix += 1
            self.slug = slug
        super().save(*args, **kwargs)
