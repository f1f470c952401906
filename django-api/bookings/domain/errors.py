"""Domain error codes for the bookings module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    APARTMENT_NOT_FOUND = "APARTMENT_NOT_FOUND"
    INVALID_APARTMENT_ID = "INVALID_APARTMENT_ID"
    DATE_BOOKED = "DATE_BOOKED"
    RANGE_CONFLICT = "RANGE_CONFLICT"
    PAST_DATE = "PAST_DATE"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    RULES_NOT_ACCEPTED = "RULES_NOT_ACCEPTED"
    AVAILABILITY_UNKNOWN = "AVAILABILITY_UNKNOWN"
    AVAILABILITY_LOAD_FAILED = "AVAILABILITY_LOAD_FAILED"
    EMPTY_COUPON_CODE = "EMPTY_COUPON_CODE"
    INVALID_OR_EXPIRED_COUPON = "INVALID_OR_EXPIRED_COUPON"
    COUPON_LOOKUP_FAILED = "COUPON_LOOKUP_FAILED"
    CHECKOUT_FAILED = "CHECKOUT_FAILED"
    SESSION_CLOSED = "SESSION_CLOSED"
    INVALID_REQUEST = "INVALID_REQUEST"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ApartmentNotFoundError(DomainError):
    """Raised when an apartment is not in the catalog."""

    def __init__(self, apartment_id: str) -> None:
        super().__init__(
            code=ErrorCode.APARTMENT_NOT_FOUND,
            message="Apartment not found",
        )
        self.apartment_id = apartment_id


class InvalidApartmentIdError(DomainError):
    """Raised when an apartment ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_APARTMENT_ID,
            message="Invalid apartment ID format",
        )


class DateBookedError(DomainError):
    """Raised when a selected check-in or check-out day is already booked."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.DATE_BOOKED,
            message="This date is already booked",
        )


class RangeConflictError(DomainError):
    """Raised when a booked day falls inside the selected range."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.RANGE_CONFLICT,
            message="Some days in this range are already booked",
        )


class PastDateError(DomainError):
    """Raised when a day before today is selected."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PAST_DATE,
            message="Dates in the past cannot be booked",
        )


class InvalidDateRangeError(DomainError):
    """Raised when check-out is not strictly after check-in."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE_RANGE,
            message="Check-out date must be after check-in date",
        )


class MissingRequiredFieldError(DomainError):
    """Raised on submission when a required draft field is empty."""

    def __init__(self, fields: tuple[str, ...] = ()) -> None:
        super().__init__(
            code=ErrorCode.MISSING_REQUIRED_FIELD,
            message="missing required field",
        )
        self.fields = fields


class RulesNotAcceptedError(DomainError):
    """Raised when the house rules must be accepted first."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.RULES_NOT_ACCEPTED,
            message="Please accept the house rules",
        )


class AvailabilityUnknownError(DomainError):
    """Raised on submission while booked dates are not loaded."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.AVAILABILITY_UNKNOWN,
            message="Availability is not known yet, please try again",
        )


class AvailabilityLoadError(DomainError):
    """Recorded when the booked intervals could not be fetched."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.AVAILABILITY_LOAD_FAILED,
            message="Failed to fetch available dates",
        )


class EmptyCouponCodeError(DomainError):
    """Raised when the coupon code is blank."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_COUPON_CODE,
            message="Please enter a coupon code",
        )


class InvalidOrExpiredCouponError(DomainError):
    """Raised when no active, unexpired coupon matches the code."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_OR_EXPIRED_COUPON,
            message="Invalid or expired coupon code",
        )


class CouponLookupFailedError(DomainError):
    """Raised when the coupon store could not be queried."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.COUPON_LOOKUP_FAILED,
            message="Failed to validate coupon",
        )


class CheckoutFailedError(DomainError):
    """Raised when the payment session could not be created."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.CHECKOUT_FAILED,
            message="Failed to create checkout session",
        )


class SessionClosedError(DomainError):
    """Raised when a finished booking session is used again."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.SESSION_CLOSED,
            message="This booking session has already been completed",
        )


class InvalidRequestError(DomainError):
    """Raised when request input fails format validation."""

    def __init__(self, message: str = "Invalid request") -> None:
        super().__init__(code=ErrorCode.INVALID_REQUEST, message=message)
