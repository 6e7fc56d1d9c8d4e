from django.db import models


class Lead(models.Model):
    """Inquiry captured from the public site."""

    STATUS_NEW = 'new'
    STATUS_CONTACTED = 'contacted'
    STATUS_CONVERTED = 'converted'
    STATUS_LOST = 'lost'
    STATUS_CHOICES = [
        (STATUS_NEW, 'New'),
        (STATUS_CONTACTED, 'Contacted'),
        (STATUS_CONVERTED, 'Converted'),
        (STATUS_LOST, 'Lost'),
    ]

    # Cycle used by the status toggle of the dashboard table
    STATUS_CYCLE = {
        STATUS_NEW: STATUS_CONTACTED,
        STATUS_CONTACTED: STATUS_CONVERTED,
        STATUS_CONVERTED: STATUS_NEW,
    }

    name = models.CharField(max_length=150)
    mobile = models.CharField(max_length=10)
    email = models.EmailField(blank=True, default='')
    source_url = models.CharField(max_length=1000, blank=True, default='')
    package_name = models.CharField(max_length=300, blank=True, default='')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_NEW)
    read = models.BooleanField(default=False)
    destination = models.CharField(max_length=200, blank=True, default='')
    travel_date = models.DateField(null=True, blank=True)
    travelers_count = models.PositiveIntegerField(null=True, blank=True)
    travel_type = models.CharField(max_length=100, blank=True, default='')
    budget = models.CharField(max_length=100, blank=True, default='')
    notes = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Lead"
        verbose_name_plural = "Leads"
        db_table = "leads"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.name} ({self.mobile})"

    def next_status(self):
        """new -> contacted -> converted -> new; anything else restarts at new."""
        return self.STATUS_CYCLE.get(self.status, self.STATUS_NEW)
