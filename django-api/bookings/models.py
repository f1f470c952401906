"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
"""

import uuid

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class ApartmentRecord(models.Model):
    """Persistence model for catalog apartments."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    key = models.SlugField(
        max_length=100,
        blank=True,
        help_text="Name bookings are filed under. Derived from the name when empty.",
    )
    description = models.TextField(blank=True)
    price_per_night = models.DecimalField(max_digits=10, decimal_places=2)
    image_url = models.URLField(max_length=500, blank=True, null=True)
    features = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class BookingRecord(models.Model):
    """Persistence model for confirmed stays."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    apartment_key = models.CharField(max_length=100)
    check_in = models.DateField()
    check_out = models.DateField()
    guest_name = models.CharField(max_length=255, blank=True)
    guest_email = models.EmailField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["check_in"]
        indexes = [
            models.Index(fields=["apartment_key", "check_in"], name="bookings_bo_apartme_5f2c1e_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.apartment_key}: {self.check_in} - {self.check_out}"


class CouponRecord(models.Model):
    """Persistence model for discount coupons."""

    code = models.CharField(max_length=64, unique=True)
    discount_percent = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        validators=[MinValueValidator(0), MaxValueValidator(100)],
    )
    is_active = models.BooleanField(default=True)
    expires_at = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=["code", "is_active"], name="bookings_co_code_8d41a2_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.code} ({self.discount_percent}%)"
