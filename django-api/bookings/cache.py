"""Cache keys for the apartment catalog."""

from django.conf import settings

APARTMENT_LIST_KEY = "apartments:list"


def apartment_detail_key(apartment_id: str) -> str:
    return f"apartments:{apartment_id}"


def catalog_timeout() -> int:
    return settings.BOOKING.get("CATALOG_CACHE_SECONDS", 300)
