"""Booking service - all business logic behind the HTTP handlers lives here.

Services:
- Depend only on interfaces (stores, checkout handoff)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or raise domain errors

Each request is one booking attempt: the posted draft is replayed through a
fresh BookingSession so the same rules apply as in an interactive dialog.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime

from asgiref.sync import sync_to_async
from django.utils import timezone

from bookings.checkout.interfaces import CheckoutHandoff
from bookings.domain import Coupon, PriceQuote
from bookings.domain.calendar import MonthCalendar
from bookings.domain.errors import AvailabilityUnknownError, InvalidRequestError
from bookings.services.apartment_service import ApartmentService
from bookings.services.booking_session import BookingSession, BookingSessionConfig, LoadStatus
from bookings.services.coupon_validator import CouponValidator
from bookings.stores.interfaces import ReservationStore


@dataclass(frozen=True)
class AvailabilityView:
    booked_dates: list[date]
    calendar: MonthCalendar


@dataclass(frozen=True)
class DraftInput:
    """Booking form values as posted by the client."""

    check_in: date | None = None
    check_out: date | None = None
    guest_name: str | None = None
    guest_email: str | None = None
    coupon_code: str | None = None
    rules_accepted: bool = False


class BookingService:
    """Service for availability, pricing and checkout of one apartment."""

    def __init__(
        self,
        apartments: ApartmentService,
        store: ReservationStore,
        handoff: CheckoutHandoff,
        config: BookingSessionConfig | None = None,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._apartments = apartments
        self._store = store
        self._handoff = handoff
        self._config = config or BookingSessionConfig()
        self._clock = clock
        self._validator = CouponValidator(store, clock)

    def new_session(self) -> BookingSession:
        return BookingSession(
            self._store,
            self._handoff,
            validator=self._validator,
            config=self._config,
            clock=self._clock,
        )

    async def open_session(self, apartment_id: str) -> BookingSession:
        """Open a session for the apartment with its booked days loaded.

        Raises:
            InvalidApartmentIdError, ApartmentNotFoundError: Unknown apartment.
            AvailabilityUnknownError: The booked days could not be loaded.
        """
        apartment = await sync_to_async(self._apartments.get_apartment)(apartment_id)
        session = self.new_session()
        await session.open(apartment)
        if session.load_status is not LoadStatus.LOADED:
            raise AvailabilityUnknownError()
        return session

    async def availability(
        self, apartment_id: str, year: int | None = None, month: int | None = None
    ) -> AvailabilityView:
        session = await self.open_session(apartment_id)
        today = session.today
        try:
            calendar = session.calendar(year or today.year, month or today.month)
        except ValueError:
            raise InvalidRequestError("Invalid year or month")
        return AvailabilityView(booked_dates=session.date_set.sorted_days(), calendar=calendar)

    async def validate_coupon(self, code: str) -> Coupon:
        result = await self._validator.validate(code)
        if not result.ok:
            raise result.error
        return result.coupon

    async def quote(self, apartment_id: str, draft: DraftInput) -> PriceQuote:
        session = await self._replay(apartment_id, draft)
        return session.price_quote()

    async def checkout(self, apartment_id: str, draft: DraftInput) -> str:
        session = await self._replay(apartment_id, draft)
        return await session.submit()

    async def _replay(self, apartment_id: str, draft: DraftInput) -> BookingSession:
        session = await self.open_session(apartment_id)
        session.accept_rules(draft.rules_accepted)
        if draft.check_in is not None:
            session.select_check_in(draft.check_in)
        if draft.check_out is not None:
            session.select_check_out(draft.check_out)
        session.set_guest(draft.guest_name, draft.guest_email)
        if draft.coupon_code:
            await session.apply_coupon(draft.coupon_code)
        return session
