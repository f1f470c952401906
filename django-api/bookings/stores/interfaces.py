"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from bookings.domain import Apartment, ApartmentId, BookedInterval, Coupon


class ApartmentStore(ABC):
    """Interface for catalog read operations."""

    @abstractmethod
    def list_apartments(self) -> list[Apartment]:
        """Return all apartments ordered by name."""
        ...

    @abstractmethod
    def get_apartment(self, apartment_id: ApartmentId) -> Apartment | None:
        """Return an apartment by ID, or None if not found."""
        ...


class ReservationStore(ABC):
    """Interface for reservation and coupon lookups.

    Both calls may suspend while the backing store is queried.
    """

    @abstractmethod
    async def list_bookings(self, apartment_key: str) -> list[BookedInterval]:
        """Return every stay filed under the apartment key."""
        ...

    @abstractmethod
    async def find_active_coupon(self, code: str, now: datetime) -> Coupon | None:
        """Return the active coupon with this exact code expiring after now."""
        ...
