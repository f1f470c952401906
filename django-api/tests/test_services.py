"""Unit tests for ApartmentService and BookingService.

These test error handling and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

from datetime import date
from decimal import Decimal

import pytest
from asgiref.sync import async_to_sync

from bookings.domain.errors import (
    ApartmentNotFoundError,
    AvailabilityUnknownError,
    DateBookedError,
    InvalidApartmentIdError,
    InvalidOrExpiredCouponError,
    InvalidRequestError,
)
from bookings.services.apartment_service import ApartmentService
from bookings.services.booking_service import BookingService, DraftInput

from conftest import InMemoryApartmentStore


@pytest.fixture
def apartment_store(apartment) -> InMemoryApartmentStore:
    return InMemoryApartmentStore([apartment])


@pytest.fixture
def booking_service(apartment_store, store, handoff, clock) -> BookingService:
    return BookingService(ApartmentService(apartment_store), store, handoff, clock=clock)


def guest_draft(**overrides) -> DraftInput:
    values = {
        "check_in": date(2024, 6, 5),
        "check_out": date(2024, 6, 8),
        "guest_name": "Ona",
        "guest_email": "ona@example.com",
    }
    values.update(overrides)
    return DraftInput(**values)


class TestApartmentService:
    """Tests for ApartmentService."""

    def test_get_apartment_invalid_id_raises_error(self, apartment_store):
        """get_apartment raises InvalidApartmentIdError for malformed UUID."""
        with pytest.raises(InvalidApartmentIdError):
            ApartmentService(apartment_store).get_apartment("abc")

    def test_get_apartment_not_found_raises_error(self, apartment_store):
        """get_apartment raises ApartmentNotFoundError when store returns None."""
        with pytest.raises(ApartmentNotFoundError):
            ApartmentService(apartment_store).get_apartment(
                "1b4e28ba-2fa1-11d2-883f-0016d3cca427"
            )

    def test_get_apartment_is_cached(self, apartment_store, apartment):
        service = ApartmentService(apartment_store)
        assert service.get_apartment(str(apartment.id)) == apartment
        assert service.get_apartment(str(apartment.id)) == apartment
        assert apartment_store.lookups == 1

    def test_list_apartments(self, apartment_store, apartment):
        assert ApartmentService(apartment_store).list_apartments() == [apartment]


class TestBookingService:
    """Tests for BookingService."""

    def test_availability_lists_booked_days(self, booking_service, apartment):
        view = async_to_sync(booking_service.availability)(str(apartment.id), 2024, 6)
        assert view.booked_dates == [date(2024, 6, 1), date(2024, 6, 2), date(2024, 6, 3)]
        assert view.calendar.month == 6

    def test_availability_defaults_to_current_month(self, booking_service, apartment):
        view = async_to_sync(booking_service.availability)(str(apartment.id))
        assert (view.calendar.year, view.calendar.month) == (2024, 5)

    def test_availability_rejects_bad_month(self, booking_service, apartment):
        with pytest.raises(InvalidRequestError):
            async_to_sync(booking_service.availability)(str(apartment.id), 2024, 13)

    def test_availability_unknown_when_store_fails(self, booking_service, store, apartment):
        store.fail_bookings = True
        with pytest.raises(AvailabilityUnknownError):
            async_to_sync(booking_service.availability)(str(apartment.id), 2024, 6)

    def test_unknown_apartment(self, booking_service):
        with pytest.raises(ApartmentNotFoundError):
            async_to_sync(booking_service.quote)(
                "1b4e28ba-2fa1-11d2-883f-0016d3cca427", guest_draft()
            )

    def test_quote_with_coupon(self, booking_service, apartment):
        price = async_to_sync(booking_service.quote)(
            str(apartment.id), DraftInput(date(2024, 6, 5), date(2024, 6, 8), coupon_code="SUMMER10")
        )
        assert price.total == Decimal("270")
        assert price.total_minor_units == 27000

    def test_quote_with_bad_coupon_raises(self, booking_service, apartment):
        with pytest.raises(InvalidOrExpiredCouponError):
            async_to_sync(booking_service.quote)(
                str(apartment.id), guest_draft(coupon_code="EXPIRED99")
            )

    def test_checkout_returns_redirect(self, booking_service, handoff, apartment):
        url = async_to_sync(booking_service.checkout)(str(apartment.id), guest_draft())
        assert url == handoff.url
        assert handoff.requests[0].total_minor_units == 30000

    def test_checkout_booked_date_raises(self, booking_service, handoff, apartment):
        with pytest.raises(DateBookedError):
            async_to_sync(booking_service.checkout)(
                str(apartment.id), guest_draft(check_in=date(2024, 6, 3))
            )
        assert handoff.requests == []

    def test_validate_coupon(self, booking_service):
        coupon = async_to_sync(booking_service.validate_coupon)("SUMMER10")
        assert coupon.discount_percent.value == Decimal("10")

    def test_validate_coupon_expired(self, booking_service):
        with pytest.raises(InvalidOrExpiredCouponError):
            async_to_sync(booking_service.validate_coupon)("EXPIRED99")
