from django.contrib import admin

from bookings.models import ApartmentRecord, BookingRecord, CouponRecord


@admin.register(ApartmentRecord)
class ApartmentAdmin(admin.ModelAdmin):
    list_display = ["name", "key", "price_per_night", "updated_at"]
    search_fields = ["name", "key"]


@admin.register(BookingRecord)
class BookingAdmin(admin.ModelAdmin):
    list_display = ["apartment_key", "check_in", "check_out", "guest_name", "guest_email"]
    list_filter = ["apartment_key"]
    date_hierarchy = "check_in"


@admin.register(CouponRecord)
class CouponAdmin(admin.ModelAdmin):
    list_display = ["code", "discount_percent", "is_active", "expires_at"]
    list_filter = ["is_active"]
    search_fields = ["code"]
