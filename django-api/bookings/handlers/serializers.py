"""Serializers for request parsing and domain-to-response transformation."""

from decimal import ROUND_HALF_UP

from rest_framework import serializers


class ApartmentSerializer(serializers.Serializer):
    """Serializer for Apartment domain model."""

    id = serializers.CharField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField()
    price_per_night = serializers.DecimalField(
        source="price_per_night.amount", max_digits=10, decimal_places=2
    )
    image_url = serializers.CharField(allow_null=True)
    features = serializers.ListField(child=serializers.CharField())


class CalendarDaySerializer(serializers.Serializer):
    date = serializers.DateField(source="day")
    is_past = serializers.BooleanField()
    is_booked = serializers.BooleanField()
    is_today = serializers.BooleanField()
    is_check_in = serializers.BooleanField()
    is_check_out = serializers.BooleanField()
    in_range = serializers.BooleanField()
    is_selectable = serializers.BooleanField()


class MonthCalendarSerializer(serializers.Serializer):
    year = serializers.IntegerField()
    month = serializers.IntegerField()
    leading_blanks = serializers.IntegerField()
    days = CalendarDaySerializer(many=True)


class AvailabilitySerializer(serializers.Serializer):
    booked_dates = serializers.ListField(child=serializers.DateField())
    calendar = MonthCalendarSerializer()


class AvailabilityQuerySerializer(serializers.Serializer):
    year = serializers.IntegerField(required=False, min_value=1, max_value=9999)
    month = serializers.IntegerField(required=False, min_value=1, max_value=12)


class CouponSerializer(serializers.Serializer):
    """Serializer for Coupon domain model."""

    code = serializers.CharField()
    discount_percent = serializers.DecimalField(
        source="discount_percent.value", max_digits=5, decimal_places=2
    )
    expires_at = serializers.DateTimeField()


class CouponCodeSerializer(serializers.Serializer):
    code = serializers.CharField(allow_blank=True, trim_whitespace=False)


class DraftSerializer(serializers.Serializer):
    """Booking form values posted for a quote or a checkout."""

    check_in = serializers.DateField(required=False, allow_null=True)
    check_out = serializers.DateField(required=False, allow_null=True)
    guest_name = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    guest_email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    coupon_code = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    rules_accepted = serializers.BooleanField(required=False, default=False)


class PriceQuoteSerializer(serializers.Serializer):
    """Serializer for PriceQuote domain model."""

    nightly_rate = serializers.DecimalField(max_digits=10, decimal_places=2)
    nights = serializers.IntegerField()
    discount_percent = serializers.DecimalField(
        max_digits=5, decimal_places=2, allow_null=True
    )
    discount = serializers.DecimalField(max_digits=12, decimal_places=2, rounding=ROUND_HALF_UP)
    total = serializers.DecimalField(max_digits=12, decimal_places=2, rounding=ROUND_HALF_UP)
    total_minor_units = serializers.IntegerField()
