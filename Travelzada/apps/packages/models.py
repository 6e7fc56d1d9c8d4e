from django.core.exceptions import ValidationError
from django.db import models

from .utils import first_int, last_int, normalize_package_id, slugify_text


# Public names of the package columns, as used by the spreadsheets, the
# AI generator and the REST API. The model field is always ``name.lower()``.
PACKAGE_API_FIELDS = [
    "Destination_ID",
    "Destination_Name",
    "Country",
    "Overview",
    "Duration",
    "Duration_Nights",
    "Duration_Days",
    "Mood",
    "Occasion",
    "Travel_Type",
    "Budget_Category",
    "Theme",
    "Adventure_Level",
    "Stay_Type",
    "Star_Category",
    "Meal_Plan",
    "Group_Size",
    "Child_Friendly",
    "Elderly_Friendly",
    "Language_Preference",
    "Seasonality",
    "Hotel_Examples",
    "Rating",
    "Location_Breakup",
    "Airport_Code",
    "Transfer_Type",
    "Currency",
    "Climate_Type",
    "Safety_Score",
    "Sustainability_Score",
    "Ideal_Traveler_Persona",
    "Price_Range_INR",
    "Price_Min_INR",
    "Price_Max_INR",
    "Inclusions",
    "Exclusions",
    "Day_Wise_Itinerary",
    "Highlights",
    "Day_Wise_Itinerary_Details",
    "Guest_Reviews",
    "Booking_Policies",
    "FAQ_Items",
    "Why_Book_With_Us",
    "Primary_Image_URL",
    "Image_Alt_Text",
    "Booking_URL",
    "Slug",
    "SEO_Title",
    "SEO_Description",
    "SEO_Keywords",
    "Meta_Image_URL",
    "Created_By",
    "Last_Updated",
]

API_TO_FIELD = {name: name.lower() for name in PACKAGE_API_FIELDS}
FIELD_TO_API = {field: name for name, field in API_TO_FIELD.items()}


def empty_booking_policies():
    return {"booking": [], "payment": [], "cancellation": []}


class Package(models.Model):
    """
    Sellable travel package.

    ``destination_id`` is assigned by the content team (e.g. ``BAL_001``); its
    first three characters are the destination code used by the spreadsheet
    import. It is not unique at the database level: duplicates are only
    rejected by the bulk import, comparing IDs trimmed and upper-cased.
    """

    destination_id = models.CharField(max_length=100, db_index=True)
    destination_name = models.CharField(max_length=200)
    country = models.CharField(max_length=100, blank=True, default="")
    overview = models.TextField(blank=True, default="")

    # Duration
    duration = models.CharField(max_length=100, blank=True, default="")
    duration_nights = models.PositiveIntegerField(null=True, blank=True)
    duration_days = models.PositiveIntegerField(null=True, blank=True)

    # Classification
    mood = models.CharField(max_length=200, blank=True, default="")
    occasion = models.CharField(max_length=200, blank=True, default="")
    travel_type = models.CharField(max_length=200, blank=True, default="")
    budget_category = models.CharField(max_length=100, blank=True, default="")
    theme = models.CharField(max_length=200, blank=True, default="")
    adventure_level = models.CharField(max_length=100, blank=True, default="")
    stay_type = models.CharField(max_length=200, blank=True, default="")
    star_category = models.CharField(max_length=100, blank=True, default="")
    meal_plan = models.CharField(max_length=200, blank=True, default="")
    group_size = models.CharField(max_length=100, blank=True, default="")
    child_friendly = models.CharField(max_length=100, blank=True, default="")
    elderly_friendly = models.CharField(max_length=100, blank=True, default="")
    language_preference = models.CharField(max_length=200, blank=True, default="")
    seasonality = models.CharField(max_length=200, blank=True, default="")
    hotel_examples = models.TextField(blank=True, default="")
    rating = models.CharField(max_length=50, blank=True, default="")
    location_breakup = models.TextField(blank=True, default="")
    airport_code = models.CharField(max_length=50, blank=True, default="")
    transfer_type = models.CharField(max_length=100, blank=True, default="")
    currency = models.CharField(max_length=10, blank=True, default="INR")
    climate_type = models.CharField(max_length=100, blank=True, default="")
    safety_score = models.CharField(max_length=50, blank=True, default="")
    sustainability_score = models.CharField(max_length=50, blank=True, default="")
    ideal_traveler_persona = models.TextField(blank=True, default="")

    # Pricing
    price_range_inr = models.CharField(max_length=100, blank=True, default="")
    price_min_inr = models.PositiveIntegerField(null=True, blank=True)
    price_max_inr = models.PositiveIntegerField(null=True, blank=True)

    # Content
    inclusions = models.TextField(blank=True, default="")
    exclusions = models.TextField(blank=True, default="")
    day_wise_itinerary = models.TextField(
        blank=True,
        default="",
        help_text="Itinerary as text: 'Day 1: ... | Day 2: ...'"
    )
    highlights = models.JSONField(default=list, blank=True)
    day_wise_itinerary_details = models.JSONField(
        default=list,
        blank=True,
        help_text="List of {day, title, description}"
    )
    guest_reviews = models.JSONField(default=list, blank=True)
    booking_policies = models.JSONField(default=empty_booking_policies, blank=True)
    faq_items = models.JSONField(default=list, blank=True)
    why_book_with_us = models.JSONField(default=list, blank=True)

    # Media, links and SEO
    primary_image_url = models.CharField(max_length=1000, blank=True, default="")
    image_alt_text = models.CharField(max_length=300, blank=True, default="")
    booking_url = models.CharField(max_length=1000, blank=True, default="")
    slug = models.SlugField(max_length=200, blank=True, default="", db_index=True)
    seo_title = models.CharField(max_length=300, blank=True, default="")
    seo_description = models.TextField(blank=True, default="")
    seo_keywords = models.TextField(blank=True, default="")
    meta_image_url = models.CharField(max_length=1000, blank=True, default="")

    created_by = models.CharField(max_length=254, blank=True, default="")
    last_updated = models.DateField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Package"
        verbose_name_plural = "Packages"
        db_table = "packages"
        ordering = ["-last_updated", "-created_at"]

    def __str__(self):
        return f"{self.destination_id} - {self.destination_name}"

    @property
    def normalized_id(self):
        return normalize_package_id(self.destination_id)

    @property
    def destination_slug(self):
        """Destination page slug, taken from the ID prefix: ``BAL_001`` -> ``bal``."""
        return (self.destination_id or "").strip().split("_")[0].lower()

    def clean(self):
        if not (self.destination_id or "").strip():
            raise ValidationError({"destination_id": "Destination_ID is required."})
        if not (self.destination_name or "").strip():
            raise ValidationError({"destination_name": "Destination_Name is required."})
        if (
            self.price_min_inr is not None
            and self.price_max_inr is not None
            and self.price_min_inr > self.price_max_inr
        ):
            raise ValidationError("Price_Min_INR cannot be greater than Price_Max_INR.")

    @classmethod
    def from_db(cls, db, field_names, values):
        instance = super().from_db(db, field_names, values)
        instance._stored_prices = (
            instance.__dict__.get("price_range_inr"),
            instance.__dict__.get("price_min_inr"),
            instance.__dict__.get("price_max_inr"),
        )
        return instance

    def derive_price_bounds(self):
        """
        Fills the bounds from ``price_range_inr``. A changed range replaces
        bounds that were left at their stored values.
        """
        stored_range, stored_min, stored_max = getattr(self, "_stored_prices", (None, None, None))
        range_changed = self.price_range_inr != stored_range
        if self.price_min_inr is None or (range_changed and self.price_min_inr == stored_min):
            self.price_min_inr = first_int(self.price_range_inr)
        if self.price_max_inr is None or (range_changed and self.price_max_inr == stored_max):
            self.price_max_inr = last_int(self.price_range_inr)

    def save(self, *args, **kwargs):
        self.destination_id = (self.destination_id or "").strip()
        if not self.slug:
            self.slug = slugify_text(self.destination_name)[:200]
        if self.price_range_inr:
            self.derive_price_bounds()
            update_fields = kwargs.get("update_fields")
            if update_fields is not None and "price_range_inr" in update_fields:
                kwargs["update_fields"] = set(update_fields) | {"price_min_inr", "price_max_inr"}
        if self.booking_policies in (None, ""):
            self.booking_policies = empty_booking_policies()
        super().save(*args, **kwargs)
        self._stored_prices = (self.price_range_inr, self.price_min_inr, self.price_max_inr)
