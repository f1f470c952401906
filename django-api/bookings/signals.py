"""Django signals for catalog cache invalidation.

Booked dates are never cached, so booking and coupon writes need no handlers.
"""

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from bookings.cache import APARTMENT_LIST_KEY, apartment_detail_key
from bookings.models import ApartmentRecord


@receiver([post_save, post_delete], sender=ApartmentRecord)
def invalidate_apartment_cache(sender, instance, **kwargs):
    """Invalidate caches when an apartment is saved or deleted."""
    cache.delete_many([APARTMENT_LIST_KEY, apartment_detail_key(str(instance.pk))])
