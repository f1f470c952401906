"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in bookings/models.py (persistence layer).
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Self

from bookings.domain.value_objects import ApartmentId, DiscountPercent, Money, to_day


@dataclass(frozen=True)
class Apartment:
    """Domain representation of a bookable Apartment."""

    id: ApartmentId
    name: str
    key: str
    description: str
    price_per_night: Money
    image_url: str | None = None
    features: tuple[str, ...] = ()


@dataclass(frozen=True)
class BookedInterval:
    """A reserved stay that blocks dates for one apartment."""

    check_in: date
    check_out: date

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Self:
        """Build from a store row holding dates, datetimes or ISO strings.

        Raises:
            KeyError: If a boundary is missing.
            ValueError: If a boundary cannot be parsed.
        """
        return cls(check_in=to_day(row["check_in"]), check_out=to_day(row["check_out"]))


@dataclass(frozen=True)
class Coupon:
    """Domain representation of a reusable discount code."""

    code: str
    discount_percent: DiscountPercent
    is_active: bool
    expires_at: datetime

    def is_valid_at(self, now: datetime) -> bool:
        return self.is_active and self.expires_at > now


@dataclass
class BookingDraft:
    """In-progress booking attempt, mutated by the booking session."""

    apartment_id: ApartmentId
    check_in: date | None = None
    check_out: date | None = None
    guest_name: str | None = None
    guest_email: str | None = None
    applied_coupon: Coupon | None = None
    rules_accepted: bool = False

    def missing_fields(self) -> tuple[str, ...]:
        values = {
            "check_in": self.check_in,
            "check_out": self.check_out,
            "guest_name": (self.guest_name or "").strip(),
            "guest_email": (self.guest_email or "").strip(),
        }
        return tuple(name for name, value in values.items() if not value)

    @property
    def nights(self) -> int:
        if self.check_in is None or self.check_out is None:
            return 0
        return max((self.check_out - self.check_in).days, 0)
