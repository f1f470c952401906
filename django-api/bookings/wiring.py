"""Builds services from Django settings."""

from django.conf import settings

from bookings.checkout import CheckoutHandoff, StripeCheckoutHandoff
from bookings.domain import ApartmentKeyResolver
from bookings.services.apartment_service import ApartmentService
from bookings.services.booking_service import BookingService
from bookings.services.booking_session import BookingSessionConfig
from bookings.stores.django_store import DjangoApartmentStore, DjangoReservationStore


def apartment_service() -> ApartmentService:
    resolver = ApartmentKeyResolver(settings.BOOKING.get("APARTMENT_KEYS", {}))
    return ApartmentService(DjangoApartmentStore(resolver))


def checkout_handoff() -> CheckoutHandoff:
    return StripeCheckoutHandoff(
        secret_key=settings.STRIPE_SECRET_KEY,
        success_url=settings.BOOKING["SUCCESS_URL"],
        cancel_url=settings.BOOKING["CANCEL_URL"],
        api_base=settings.STRIPE_API_BASE,
        timeout=settings.BOOKING.get("CHECKOUT_TIMEOUT", 10.0),
    )


def booking_service() -> BookingService:
    return BookingService(
        apartment_service(),
        DjangoReservationStore(),
        checkout_handoff(),
        config=BookingSessionConfig.from_settings(),
    )
