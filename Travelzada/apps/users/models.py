# apps/users/models.py
from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models


TAB_PACKAGES = 'packages'
TAB_BLOGS = 'blogs'
TAB_USERS = 'users'
TAB_DESTINATIONS = 'destinations'
TAB_SUBSCRIBERS = 'subscribers'
TAB_CONTACTS = 'contacts'
TAB_LEADS = 'leads'
TAB_CAREERS = 'careers'
TAB_TESTIMONIALS = 'testimonials'
TAB_DASHBOARD = 'dashboard'
TAB_AI_GENERATOR = 'ai-generator'
TAB_CREATE_ITINERARY = 'create-itinerary'
TAB_CUSTOMER_RECORDS = 'customer-records'

TAB_NAMES = [
    TAB_PACKAGES,
    TAB_BLOGS,
    TAB_USERS,
    TAB_DESTINATIONS,
    TAB_SUBSCRIBERS,
    TAB_CONTACTS,
    TAB_LEADS,
    TAB_CAREERS,
    TAB_TESTIMONIALS,
    TAB_DASHBOARD,
    TAB_AI_GENERATOR,
    TAB_CREATE_ITINERARY,
    TAB_CUSTOMER_RECORDS,
]


class UserManager(BaseUserManager):
    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError('The email address is required')
        email = self.normalize_email(email).strip().lower()
        extra_fields.setdefault('username', email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', False)
        extra_fields.setdefault('is_superuser', False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('role', User.ROLE_ADMIN)
        return self._create_user(email, password, **extra_fields)


class User(AbstractUser):
    """
    Account used both by customers and by the admin dashboard.

    Access to a dashboard section is granted by ``role == 'admin'`` or by the
    section's tab name being listed in ``permissions``. Tokens already issued
    keep the claims they were created with, so a role change is only seen by
    the client after it logs in again.
    """

    ROLE_USER = 'user'
    ROLE_ADMIN = 'admin'
    ROLE_CHOICES = [
        (ROLE_USER, 'User'),
        (ROLE_ADMIN, 'Admin'),
    ]

    email = models.EmailField(unique=True)
    display_name = models.CharField(max_length=150, blank=True, default='')
    photo_url = models.CharField(max_length=500, blank=True, default='')
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default=ROLE_USER)
    permissions = models.JSONField(
        default=list,
        blank=True,
        help_text="Dashboard tabs this user may open",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    class Meta:
        verbose_name = "User"
        verbose_name_plural = "Users"
        db_table = "users"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.email} ({self.role})"

    def save(self, *args, **kwargs):
        if self.email:
            self.email = self.email.strip().lower()
        if not self.username:
            self.username = self.email
        super().save(*args, **kwargs)

    @property
    def is_admin(self):
        return self.role == self.ROLE_ADMIN or self.is_superuser

    def has_tab(self, tab):
        if not self.is_active:
            return False
        if self.is_admin:
            return True
        return bool(tab) and tab in (self.permissions or [])
