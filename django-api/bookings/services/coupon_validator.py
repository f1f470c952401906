"""Coupon lookup that always resolves to a coupon or a typed error."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from django.utils import timezone

from bookings.domain import Coupon
from bookings.domain.errors import (
    CouponLookupFailedError,
    DomainError,
    EmptyCouponCodeError,
    InvalidOrExpiredCouponError,
)
from bookings.stores.interfaces import ReservationStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CouponResult:
    coupon: Coupon | None = None
    error: DomainError | None = None

    @property
    def ok(self) -> bool:
        return self.coupon is not None


class CouponValidator:
    """Validates codes against the reservation store. Never raises."""

    def __init__(
        self,
        store: ReservationStore,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._store = store
        self._clock = clock

    async def validate(self, code: str) -> CouponResult:
        code = (code or "").strip()
        if not code:
            return CouponResult(error=EmptyCouponCodeError())

        now = self._clock()
        try:
            coupon = await self._store.find_active_coupon(code, now)
        except Exception:
            logger.exception("Coupon lookup failed for %r", code)
            return CouponResult(error=CouponLookupFailedError())

        if coupon is None or not coupon.is_valid_at(now):
            logger.info("Rejected coupon %r", code)
            return CouponResult(error=InvalidOrExpiredCouponError())
        return CouponResult(coupon=coupon)
