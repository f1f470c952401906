from bookings.handlers.views import (
    ApartmentDetailView,
    ApartmentListView,
    AvailabilityView,
    CheckoutView,
    CouponValidateView,
    QuoteView,
)

__all__ = [
    "ApartmentListView",
    "ApartmentDetailView",
    "AvailabilityView",
    "QuoteView",
    "CheckoutView",
    "CouponValidateView",
]
