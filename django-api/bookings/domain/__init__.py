from bookings.domain.availability import Availability, DateSet, build_date_set
from bookings.domain.models import Apartment, BookedInterval, BookingDraft, Coupon
from bookings.domain.pricing import PriceQuote, compute_total, to_minor_units
from bookings.domain.value_objects import (
    ApartmentId,
    ApartmentKeyResolver,
    DiscountPercent,
    Money,
)

__all__ = [
    "Apartment",
    "BookedInterval",
    "BookingDraft",
    "Coupon",
    "ApartmentId",
    "ApartmentKeyResolver",
    "DiscountPercent",
    "Money",
    "Availability",
    "DateSet",
    "build_date_set",
    "PriceQuote",
    "compute_total",
    "to_minor_units",
]
