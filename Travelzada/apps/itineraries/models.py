from decimal import Decimal

from django.db import models
from django.utils import timezone


class CustomerItinerary(models.Model):
    """
    CRM record of an itinerary sent to a client.

    ``balance_due`` is derived from the cost and the advance on every save;
    ``history`` only grows.
    """

    STATUS_DRAFT = 'draft'
    STATUS_SENT = 'sent'
    STATUS_CONFIRMED = 'confirmed'
    STATUS_COMPLETED = 'completed'
    STATUS_CANCELLED = 'cancelled'
    STATUS_CHOICES = [
        (STATUS_DRAFT, 'Draft'),
        (STATUS_SENT, 'Sent'),
        (STATUS_CONFIRMED, 'Confirmed'),
        (STATUS_COMPLETED, 'Completed'),
        (STATUS_CANCELLED, 'Cancelled'),
    ]

    # Client
    client_name = models.CharField(max_length=150)
    client_email = models.EmailField(blank=True, default='')
    client_phone = models.CharField(max_length=30, blank=True, default='')

    # Package
    package = models.ForeignKey(
        'packages.Package',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='itineraries'
    )
    package_name = models.CharField(max_length=300, blank=True, default='')
    destination_name = models.CharField(max_length=300, blank=True, default='')

    # Trip
    travel_date = models.DateField(null=True, blank=True)
    adults = models.PositiveIntegerField(default=2)
    children = models.PositiveIntegerField(default=0)

    # Money
    total_cost = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    advance_paid = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    balance_due = models.DecimalField(max_digits=12, decimal_places=2, default=0, editable=False)

    flights = models.JSONField(default=list, blank=True)
    hotels = models.JSONField(default=list, blank=True)
    custom_itinerary = models.JSONField(default=list, blank=True)

    notes = models.TextField(blank=True, default='')
    customer_review = models.TextField(blank=True, default='')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_DRAFT)
    history = models.JSONField(default=list, blank=True)
    created_by = models.CharField(max_length=254, blank=True, default='admin')

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Customer itinerary"
        verbose_name_plural = "Customer itineraries"
        db_table = "customer_itineraries"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.client_name} - {self.package_name}"

    @staticmethod
    def history_entry(action, details='', user=None):
        return {
            'action': action,
            'timestamp': timezone.now().isoformat(),
            'details': details,
            'user': user or 'admin',
        }

    def add_history(self, action, details='', user=None):
        self.history = list(self.history or []) + [self.history_entry(action, details, user)]

    def save(self, *args, **kwargs):
        self.balance_due = Decimal(self.total_cost or 0) - Decimal(self.advance_paid or 0)
        update_fields = kwargs.get('update_fields')
        if update_fields is not None and ('total_cost' in update_fields or 'advance_paid' in update_fields):
            kwargs['update_fields'] = set(update_fields) | {'balance_due'}
        super().save(*args, **kwargs)
