import uuid

from django.db import models


def default_passengers():
    return {"adults": 2, "kids": 0, "rooms": 1}


class TailoredLead(models.Model):
    """Request captured by the tailored travel wizard."""

    STATUS_NEW = 'new'
    STATUS_CONTACTED = 'contacted'
    STATUS_CONVERTED = 'converted'
    STATUS_CHOICES = [
        (STATUS_NEW, 'New'),
        (STATUS_CONTACTED, 'Contacted'),
        (STATUS_CONVERTED, 'Converted'),
    ]

    SOURCE_WIZARD = 'tailored_travel_wizard'

    lead_id = models.UUIDField(default=uuid.uuid4, unique=True, editable=False)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_NEW)
    source = models.CharField(max_length=50, default=SOURCE_WIZARD)

    destinations = models.JSONField(default=list, blank=True)
    date_range = models.CharField(max_length=100, blank=True, default='Flexible')
    experiences = models.JSONField(default=list, blank=True)
    route_items = models.JSONField(default=list, blank=True)
    group_type = models.CharField(max_length=50, blank=True, default='')
    inclusions = models.JSONField(default=list, blank=True)
    hotel_types = models.JSONField(default=list, blank=True)
    passengers = models.JSONField(default=default_passengers, blank=True)

    contact_name = models.CharField(max_length=150)
    contact_phone = models.CharField(max_length=30)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Tailored lead"
        verbose_name_plural = "Tailored leads"
        db_table = "tailored_leads"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.contact_name} - {', '.join(self.destinations or [])}"
