from django.db import models


class Subscriber(models.Model):
    STATUS_ACTIVE = 'active'
    STATUS_UNSUBSCRIBED = 'unsubscribed'
    STATUS_CHOICES = [
        (STATUS_ACTIVE, 'Active'),
        (STATUS_UNSUBSCRIBED, 'Unsubscribed'),
    ]

    DEFAULT_SOURCE = 'blog_page'

    email = models.EmailField(unique=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_ACTIVE)
    source = models.CharField(max_length=100, default=DEFAULT_SOURCE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Newsletter subscriber"
        verbose_name_plural = "Newsletter subscribers"
        db_table = "newsletter_subscribers"
        ordering = ["-created_at"]

    def __str__(self):
        return self.email
