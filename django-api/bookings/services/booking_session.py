"""Booking session: one guest's attempt to book one apartment.

The session owns a mutable draft and walks it through

    EMPTY -> DATES_PARTIAL -> DATES_SELECTED <-> COUPON_PENDING -> READY
          -> SUBMITTING -> REDIRECTED | FAILED

Date selection is synchronous and checked against the apartment's booked
days. Loading booked days, validating a coupon and creating the payment
session suspend; each is tagged with the apartment context it was issued
for, and a result that comes back after the guest switched apartments is
dropped.

Availability is never assumed: until the booked days load successfully,
every day reports ``Availability.UNKNOWN`` and submission is refused.

The submit-time range recheck is check-then-act against a store that has no
locking. Two sessions can both pass it for overlapping stays and both reach
the payment provider; preventing that needs an atomic reservation on the
server that records bookings, which this module does not own.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Self

from django.conf import settings
from django.utils import timezone

from bookings.checkout.interfaces import CheckoutHandoff, CheckoutRequest
from bookings.domain import Apartment, Availability, BookingDraft, Coupon, DateSet, build_date_set
from bookings.domain.calendar import MonthCalendar, month_calendar
from bookings.domain.errors import (
    AvailabilityLoadError,
    AvailabilityUnknownError,
    CheckoutFailedError,
    CouponLookupFailedError,
    DateBookedError,
    DomainError,
    InvalidDateRangeError,
    MissingRequiredFieldError,
    PastDateError,
    RangeConflictError,
    RulesNotAcceptedError,
    SessionClosedError,
)
from bookings.domain.pricing import PriceQuote, quote
from bookings.domain.value_objects import to_day
from bookings.services.coupon_validator import CouponResult, CouponValidator
from bookings.stores.interfaces import ReservationStore

logger = logging.getLogger(__name__)


class SessionState(Enum):
    EMPTY = "empty"
    DATES_PARTIAL = "dates_partial"
    DATES_SELECTED = "dates_selected"
    COUPON_PENDING = "coupon_pending"
    READY = "ready"
    SUBMITTING = "submitting"
    REDIRECTED = "redirected"
    FAILED = "failed"


class LoadStatus(Enum):
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class BookingSessionConfig:
    currency: str = "eur"
    require_rules_acceptance: bool = False

    @classmethod
    def from_settings(cls) -> Self:
        options = settings.BOOKING
        return cls(
            currency=options.get("CURRENCY", cls.currency),
            require_rules_acceptance=options.get(
                "REQUIRE_RULES_ACCEPTANCE", cls.require_rules_acceptance
            ),
        )


class BookingSession:
    """State machine driving a single booking attempt."""

    def __init__(
        self,
        store: ReservationStore,
        handoff: CheckoutHandoff,
        validator: CouponValidator | None = None,
        config: BookingSessionConfig | None = None,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._store = store
        self._handoff = handoff
        self._validator = validator or CouponValidator(store, clock)
        self._config = config or BookingSessionConfig()
        self._clock = clock
        self._generation = 0
        self._closed = False
        self.apartment: Apartment | None = None
        self.draft: BookingDraft | None = None
        self.date_set = DateSet()
        self.load_status = LoadStatus.LOADING
        self.state = SessionState.EMPTY
        self.last_error: DomainError | None = None

    # Apartment context

    async def open(self, apartment: Apartment) -> None:
        """Start a fresh draft for the apartment and load its booked days."""
        self._generation += 1
        self._closed = False
        self.apartment = apartment
        self.draft = BookingDraft(apartment_id=apartment.id)
        self.date_set = DateSet()
        self.last_error = None
        self._settle()
        await self._load_booked_days(self._generation, apartment)

    async def reload_availability(self) -> None:
        self._editable_draft()
        await self._load_booked_days(self._generation, self.apartment)

    async def _load_booked_days(self, generation: int, apartment: Apartment) -> None:
        self.load_status = LoadStatus.LOADING
        try:
            intervals = await self._store.list_bookings(apartment.key)
            date_set = build_date_set(intervals)
        except Exception:
            logger.exception("Failed to load booked dates for %s", apartment.key)
            if self._is_current(generation, apartment):
                self.load_status = LoadStatus.FAILED
                self.last_error = AvailabilityLoadError()
            return

        if not self._is_current(generation, apartment):
            logger.debug("Discarding stale booked dates for %s", apartment.key)
            return
        self.date_set = date_set
        self.load_status = LoadStatus.LOADED
        if isinstance(self.last_error, AvailabilityLoadError):
            self.last_error = None
        logger.debug("Loaded %d booked days for %s", len(self.date_set), apartment.key)

    def _is_current(self, generation: int, apartment: Apartment) -> bool:
        return (
            not self._closed
            and generation == self._generation
            and self.apartment is not None
            and self.apartment.id == apartment.id
        )

    # Queries

    @property
    def today(self) -> date:
        now = self._clock()
        return timezone.localdate(now) if timezone.is_aware(now) else now.date()

    def availability_of(self, day: date | datetime) -> Availability:
        if self.load_status is not LoadStatus.LOADED:
            return Availability.UNKNOWN
        return Availability.BOOKED if self.date_set.is_booked(day) else Availability.AVAILABLE

    def calendar(self, year: int, month: int) -> MonthCalendar:
        draft = self._editable_draft()
        return month_calendar(
            year,
            month,
            self.date_set,
            self.today,
            check_in=draft.check_in,
            check_out=draft.check_out,
        )

    def price_quote(self) -> PriceQuote:
        draft = self._editable_draft()
        return quote(draft.nights, self.apartment.price_per_night.amount, draft.applied_coupon)

    # Draft edits

    def select_check_in(self, day: date | datetime) -> None:
        draft = self._editable_draft()
        day = to_day(day)
        self._check_selectable(day)
        check_out = draft.check_out
        if check_out is not None and day >= check_out:
            check_out = None
        if check_out is not None and self.date_set.range_has_conflict(day, check_out):
            self._reject(RangeConflictError())
        draft.check_in, draft.check_out = day, check_out
        self._accepted()

    def select_check_out(self, day: date | datetime) -> None:
        draft = self._editable_draft()
        day = to_day(day)
        self._check_selectable(day)
        if draft.check_in is not None:
            if day <= draft.check_in:
                self._reject(InvalidDateRangeError())
            if self.date_set.range_has_conflict(draft.check_in, day):
                self._reject(RangeConflictError())
        draft.check_out = day
        self._accepted()

    def select_date(self, day: date | datetime) -> None:
        """Calendar click: completes an open range or starts a new one."""
        draft = self._editable_draft()
        day = to_day(day)
        if draft.check_in is not None and draft.check_out is None and day > draft.check_in:
            self.select_check_out(day)
        elif draft.check_out is not None and draft.check_in is not None:
            self._check_selectable(day)
            draft.check_in, draft.check_out = day, None
            self._accepted()
        else:
            self.select_check_in(day)

    def set_guest(self, name: str | None = None, email: str | None = None) -> None:
        draft = self._editable_draft()
        if name is not None:
            draft.guest_name = name
        if email is not None:
            draft.guest_email = email
        self._accepted()

    def accept_rules(self, accepted: bool = True) -> None:
        self._editable_draft().rules_accepted = accepted
        self._accepted()

    async def apply_coupon(self, code: str) -> Coupon | None:
        """Validate and attach a coupon.

        Returns None when the answer arrived for a context the session has
        already left.

        Raises:
            EmptyCouponCodeError, InvalidOrExpiredCouponError,
            CouponLookupFailedError: The previous coupon is kept.
        """
        self._editable_draft()
        generation, apartment = self._generation, self.apartment
        self.state = SessionState.COUPON_PENDING
        try:
            result = await self._validator.validate(code)
        except Exception:
            logger.exception("Coupon validation crashed")
            result = CouponResult(error=CouponLookupFailedError())

        if not self._is_current(generation, apartment):
            logger.debug("Discarding stale coupon result for %s", apartment.key)
            return None
        if not result.ok:
            self._settle()
            self._reject(result.error)
        self.draft.applied_coupon = result.coupon
        self._accepted()
        return result.coupon

    def remove_coupon(self) -> None:
        self._editable_draft().applied_coupon = None
        self._accepted()

    # Submission

    async def submit(self) -> str:
        """Hand the draft to checkout and return the redirect URL.

        Raises:
            DomainError: On any validation or checkout failure. The draft is
                kept so the guest can correct it and retry.
        """
        draft = self._editable_draft()
        self.state = SessionState.SUBMITTING
        try:
            self._validate_for_submission(draft)
        except DomainError as error:
            self._fail(error)
            raise

        request = self._checkout_request(draft)
        try:
            url = await self._handoff.create_session(request)
        except DomainError as error:
            self._fail(error)
            raise
        except Exception as exc:
            logger.exception("Checkout handoff crashed for %s", request.apartment_key)
            error = CheckoutFailedError()
            self._fail(error)
            raise error from exc
        if not url:
            error = CheckoutFailedError()
            self._fail(error)
            raise error

        logger.info(
            "Booking handed to checkout: %s %s..%s",
            request.apartment_key,
            request.check_in,
            request.check_out,
        )
        self._closed = True
        self.draft = None
        self.last_error = None
        self.state = SessionState.REDIRECTED
        return url

    def _validate_for_submission(self, draft: BookingDraft) -> None:
        missing = draft.missing_fields()
        if missing:
            raise MissingRequiredFieldError(missing)
        if self._config.require_rules_acceptance and not draft.rules_accepted:
            raise RulesNotAcceptedError()
        if draft.check_out <= draft.check_in:
            raise InvalidDateRangeError()
        if self.load_status is not LoadStatus.LOADED:
            raise AvailabilityUnknownError()
        if self.date_set.range_has_conflict(draft.check_in, draft.check_out):
            raise RangeConflictError()

    def _checkout_request(self, draft: BookingDraft) -> CheckoutRequest:
        apartment = self.apartment
        price = quote(draft.nights, apartment.price_per_night.amount, draft.applied_coupon)
        coupon = draft.applied_coupon
        return CheckoutRequest(
            apartment_id=apartment.id,
            apartment_key=apartment.key,
            apartment_name=apartment.name,
            nightly_rate_minor_units=price.nightly_rate_minor_units,
            total=price.total,
            total_minor_units=price.total_minor_units,
            currency=self._config.currency,
            guest_email=draft.guest_email.strip(),
            guest_name=draft.guest_name.strip(),
            check_in=draft.check_in.isoformat(),
            check_out=draft.check_out.isoformat(),
            coupon_code=coupon.code if coupon else None,
            discount_percent=coupon.discount_percent.value if coupon else None,
        )

    # Internals

    def _editable_draft(self) -> BookingDraft:
        if self._closed:
            raise SessionClosedError()
        if self.draft is None:
            raise RuntimeError("Booking session has not been opened")
        return self.draft

    def _check_selectable(self, day: date) -> None:
        if self._config.require_rules_acceptance and not self.draft.rules_accepted:
            self._reject(RulesNotAcceptedError())
        if day < self.today:
            self._reject(PastDateError())
        if self.date_set.is_booked(day):
            self._reject(DateBookedError())

    def _reject(self, error: DomainError) -> None:
        self.last_error = error
        raise error

    def _fail(self, error: DomainError) -> None:
        logger.info("Booking submission failed: %s", error)
        self.last_error = error
        self.state = SessionState.FAILED

    def _accepted(self) -> None:
        self.last_error = None
        self._settle()

    def _settle(self) -> None:
        draft = self.draft
        if self._closed:
            self.state = SessionState.REDIRECTED
        elif draft is None or (draft.check_in is None and draft.check_out is None):
            self.state = SessionState.EMPTY
        elif draft.check_in is None or draft.check_out is None:
            self.state = SessionState.DATES_PARTIAL
        elif draft.missing_fields() or (
            self._config.require_rules_acceptance and not draft.rules_accepted
        ):
            self.state = SessionState.DATES_SELECTED
        else:
            self.state = SessionState.READY
