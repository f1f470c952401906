"""Django ORM implementations of the stores."""

from datetime import datetime
from decimal import Decimal

from bookings.domain import (
    Apartment,
    ApartmentId,
    ApartmentKeyResolver,
    BookedInterval,
    Coupon,
    DiscountPercent,
    Money,
)
from bookings.domain.availability import parse_booked_rows
from bookings.models import ApartmentRecord, BookingRecord, CouponRecord
from bookings.stores.interfaces import ApartmentStore, ReservationStore


class DjangoApartmentStore(ApartmentStore):
    """Database-backed catalog using Django ORM."""

    def __init__(self, key_resolver: ApartmentKeyResolver) -> None:
        self._key_resolver = key_resolver

    def list_apartments(self) -> list[Apartment]:
        return [self._to_domain(record) for record in ApartmentRecord.objects.all()]

    def get_apartment(self, apartment_id: ApartmentId) -> Apartment | None:
        record = ApartmentRecord.objects.filter(pk=apartment_id.value).first()
        if record is None:
            return None
        return self._to_domain(record)

    def _to_domain(self, record: ApartmentRecord) -> Apartment:
        return Apartment(
            id=ApartmentId(record.id),
            name=record.name,
            key=record.key or self._key_resolver.resolve(record.name),
            description=record.description,
            price_per_night=Money(Decimal(record.price_per_night)),
            image_url=record.image_url or None,
            features=tuple(record.features or ()),
        )


class DjangoReservationStore(ReservationStore):
    """Database-backed reservation store using the async ORM API."""

    async def list_bookings(self, apartment_key: str) -> list[BookedInterval]:
        rows = [
            row
            async for row in BookingRecord.objects.filter(
                apartment_key=apartment_key
            ).values("check_in", "check_out")
        ]
        return parse_booked_rows(rows)

    async def find_active_coupon(self, code: str, now: datetime) -> Coupon | None:
        record = await CouponRecord.objects.filter(
            code=code, is_active=True, expires_at__gt=now
        ).afirst()
        if record is None:
            return None
        return Coupon(
            code=record.code,
            discount_percent=DiscountPercent(Decimal(record.discount_percent)),
            is_active=record.is_active,
            expires_at=record.expires_at,
        )
