"""Checkout handoff boundary.

The booking session asks for a hosted payment page and gets back a URL to
redirect the guest to. Provider credentials stay inside the implementation.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from bookings.domain import ApartmentId


@dataclass(frozen=True)
class CheckoutRequest:
    """A finalized booking ready to be paid."""

    apartment_id: ApartmentId
    apartment_key: str
    apartment_name: str
    nightly_rate_minor_units: int
    total: Decimal
    total_minor_units: int
    currency: str
    guest_email: str
    guest_name: str
    check_in: str
    check_out: str
    coupon_code: str | None = None
    discount_percent: Decimal | None = None


class CheckoutHandoff(ABC):
    """Interface for payment-session creation."""

    @abstractmethod
    async def create_session(self, request: CheckoutRequest) -> str:
        """Return the redirect URL of a new payment session.

        Raises:
            CheckoutFailedError: If the session could not be created.
        """
        ...
