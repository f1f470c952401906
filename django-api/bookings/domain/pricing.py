"""Stay pricing and conversion to payment minor units."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from bookings.domain.models import Coupon

HUNDRED = Decimal(100)


def compute_total(nights: int, nightly_rate: Decimal, coupon: Coupon | None = None) -> Decimal:
    """Return nights * rate, less the coupon's percentage if one is applied."""
    if nights < 0:
        raise ValueError("Number of nights cannot be negative")
    if nights == 0:
        return Decimal(0)
    total = nights * nightly_rate
    if coupon is not None:
        total -= discount_for(total, coupon)
    return total


def discount_for(subtotal: Decimal, coupon: Coupon | None) -> Decimal:
    if coupon is None:
        return Decimal(0)
    return subtotal * coupon.discount_percent.value / HUNDRED


def to_minor_units(amount: Decimal) -> int:
    """Convert a currency amount to cents, rounding half up."""
    return int((amount * HUNDRED).quantize(Decimal(1), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class PriceQuote:
    """Price summary for a draft booking."""

    nightly_rate: Decimal
    nights: int
    discount_percent: Decimal | None
    discount: Decimal
    total: Decimal

    @property
    def total_minor_units(self) -> int:
        return to_minor_units(self.total)

    @property
    def nightly_rate_minor_units(self) -> int:
        return to_minor_units(self.nightly_rate)


def quote(nights: int, nightly_rate: Decimal, coupon: Coupon | None = None) -> PriceQuote:
    subtotal = nights * nightly_rate
    return PriceQuote(
        nightly_rate=nightly_rate,
        nights=nights,
        discount_percent=coupon.discount_percent.value if coupon else None,
        discount=discount_for(subtotal, coupon),
        total=compute_total(nights, nightly_rate, coupon),
    )
