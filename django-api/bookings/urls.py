from django.urls import path

from bookings.handlers import (
    ApartmentDetailView,
    ApartmentListView,
    AvailabilityView,
    CheckoutView,
    CouponValidateView,
    QuoteView,
)

urlpatterns = [
    path("apartments", ApartmentListView.as_view(), name="apartment-list"),
    path(
        "apartments/<str:apartment_id>",
        ApartmentDetailView.as_view(),
        name="apartment-detail",
    ),
    path(
        "apartments/<str:apartment_id>/availability",
        AvailabilityView.as_view(),
        name="apartment-availability",
    ),
    path(
        "apartments/<str:apartment_id>/quote",
        QuoteView.as_view(),
        name="apartment-quote",
    ),
    path(
        "apartments/<str:apartment_id>/checkout",
        CheckoutView.as_view(),
        name="apartment-checkout",
    ),
    path("coupons/validate", CouponValidateView.as_view(), name="coupon-validate"),
]
