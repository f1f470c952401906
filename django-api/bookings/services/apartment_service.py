"""Apartment catalog reads with caching."""

from django.core.cache import cache

from bookings.cache import APARTMENT_LIST_KEY, apartment_detail_key, catalog_timeout
from bookings.domain import Apartment, ApartmentId
from bookings.domain.errors import ApartmentNotFoundError, InvalidApartmentIdError
from bookings.stores.interfaces import ApartmentStore


class ApartmentService:
    """Service for apartment catalog operations."""

    def __init__(self, store: ApartmentStore) -> None:
        self._store = store

    def list_apartments(self) -> list[Apartment]:
        """Return all apartments."""
        apartments = cache.get(APARTMENT_LIST_KEY)
        if apartments is None:
            apartments = self._store.list_apartments()
            cache.set(APARTMENT_LIST_KEY, apartments, catalog_timeout())
        return apartments

    def get_apartment(self, apartment_id: str) -> Apartment:
        """Return an apartment by ID.

        Raises:
            InvalidApartmentIdError: If the apartment_id is not a valid UUID.
            ApartmentNotFoundError: If the apartment does not exist.
        """
        try:
            parsed = ApartmentId.from_string(apartment_id)
        except (TypeError, ValueError):
            raise InvalidApartmentIdError()

        key = apartment_detail_key(str(parsed))
        apartment = cache.get(key)
        if apartment is None:
            apartment = self._store.get_apartment(parsed)
            if apartment is None:
                raise ApartmentNotFoundError(apartment_id)
            cache.set(key, apartment, catalog_timeout())
        return apartment
