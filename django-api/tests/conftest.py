"""Pytest configuration and shared fixtures."""

import asyncio
from datetime import date, datetime, timezone as dt_timezone
from decimal import Decimal
from uuid import uuid4

import pytest
from rest_framework.test import APIClient

from bookings.checkout import CheckoutHandoff, CheckoutRequest
from bookings.domain import (
    Apartment,
    ApartmentId,
    BookedInterval,
    Coupon,
    DiscountPercent,
    Money,
)
from bookings.services.booking_session import BookingSession, BookingSessionConfig
from bookings.stores.interfaces import ApartmentStore, ReservationStore

NOW = datetime(2024, 5, 20, 12, 0, tzinfo=dt_timezone.utc)


class InMemoryReservationStore(ReservationStore):
    """Reservation store backed by dicts, with optional gates and failures."""

    def __init__(self, bookings=None, coupons=()) -> None:
        self.bookings: dict[str, list[BookedInterval]] = dict(bookings or {})
        self.coupons: dict[str, Coupon] = {coupon.code: coupon for coupon in coupons}
        self.fail_bookings = False
        self.fail_coupons = False
        self.booking_gates: dict[str, asyncio.Event] = {}
        self.coupon_gate: asyncio.Event | None = None
        self.coupon_lookups = 0

    async def list_bookings(self, apartment_key: str) -> list[BookedInterval]:
        gate = self.booking_gates.get(apartment_key)
        if gate is not None:
            await gate.wait()
        if self.fail_bookings:
            raise ConnectionError("reservation store unavailable")
        return list(self.bookings.get(apartment_key, []))

    async def find_active_coupon(self, code: str, now: datetime) -> Coupon | None:
        self.coupon_lookups += 1
        if self.coupon_gate is not None:
            await self.coupon_gate.wait()
        if self.fail_coupons:
            raise ConnectionError("reservation store unavailable")
        coupon = self.coupons.get(code)
        if coupon is not None and coupon.is_valid_at(now):
            return coupon
        return None


class InMemoryApartmentStore(ApartmentStore):
    def __init__(self, apartments=()) -> None:
        self.apartments = {apartment.id: apartment for apartment in apartments}
        self.lookups = 0

    def list_apartments(self) -> list[Apartment]:
        return sorted(self.apartments.values(), key=lambda apartment: apartment.name)

    def get_apartment(self, apartment_id: ApartmentId) -> Apartment | None:
        self.lookups += 1
        return self.apartments.get(apartment_id)


class RecordingHandoff(CheckoutHandoff):
    """Checkout handoff that records requests instead of calling a provider."""

    def __init__(self, url: str = "https://checkout.example/session/1", error=None) -> None:
        self.url = url
        self.error = error
        self.requests: list[CheckoutRequest] = []

    async def create_session(self, request: CheckoutRequest) -> str:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.url


def interval(check_in: str, check_out: str) -> BookedInterval:
    return BookedInterval(date.fromisoformat(check_in), date.fromisoformat(check_out))


def make_coupon(code: str = "SUMMER10", percent: str = "10", **overrides) -> Coupon:
    values = {
        "code": code,
        "discount_percent": DiscountPercent(Decimal(percent)),
        "is_active": True,
        "expires_at": datetime(2024, 12, 31, tzinfo=dt_timezone.utc),
    }
    values.update(overrides)
    return Coupon(**values)


def make_apartment(name: str = "Pikulas", key: str = "pikulas", price: str = "100") -> Apartment:
    return Apartment(
        id=ApartmentId(uuid4()),
        name=name,
        key=key,
        description="Two-room apartment",
        price_per_night=Money(Decimal(price)),
        features=("wifi", "sauna"),
    )


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def apartment() -> Apartment:
    return make_apartment()


@pytest.fixture
def store() -> InMemoryReservationStore:
    return InMemoryReservationStore(
        bookings={"pikulas": [interval("2024-06-01", "2024-06-03")]},
        coupons=[
            make_coupon(),
            make_coupon(
                "EXPIRED99",
                "99",
                expires_at=datetime(2024, 1, 1, tzinfo=dt_timezone.utc),
            ),
        ],
    )


@pytest.fixture
def handoff() -> RecordingHandoff:
    return RecordingHandoff()


@pytest.fixture
def make_session(store, handoff, clock):
    def factory(config: BookingSessionConfig | None = None, **overrides) -> BookingSession:
        return BookingSession(
            overrides.get("store", store),
            overrides.get("handoff", handoff),
            config=config,
            clock=clock,
        )

    return factory
