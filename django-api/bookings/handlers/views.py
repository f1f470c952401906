"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from asgiref.sync import async_to_sync
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from bookings import wiring
from bookings.domain.errors import DomainError, ErrorCode, InvalidRequestError
from bookings.handlers.serializers import (
    ApartmentSerializer,
    AvailabilityQuerySerializer,
    AvailabilitySerializer,
    CouponCodeSerializer,
    CouponSerializer,
    DraftSerializer,
    PriceQuoteSerializer,
)
from bookings.services.booking_service import DraftInput

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.APARTMENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.DATE_BOOKED: status.HTTP_409_CONFLICT,
    ErrorCode.RANGE_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.COUPON_LOOKUP_FAILED: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.CHECKOUT_FAILED: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.AVAILABILITY_UNKNOWN: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.AVAILABILITY_LOAD_FAILED: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_response(error: DomainError) -> Response:
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST),
    )


def parse(serializer_class, data) -> dict:
    serializer = serializer_class(data=data)
    if not serializer.is_valid():
        field = next(iter(serializer.errors))
        raise InvalidRequestError(f"Invalid value for {field}")
    return serializer.validated_data


class ApartmentListView(APIView):
    """Handler for GET /api/apartments"""

    def get(self, request: Request) -> Response:
        apartments = wiring.apartment_service().list_apartments()
        return Response(ApartmentSerializer(apartments, many=True).data)


class ApartmentDetailView(APIView):
    """Handler for GET /api/apartments/{apartment_id}"""

    def get(self, request: Request, apartment_id: str) -> Response:
        try:
            apartment = wiring.apartment_service().get_apartment(apartment_id)
        except DomainError as error:
            return error_response(error)
        return Response(ApartmentSerializer(apartment).data)


class AvailabilityView(APIView):
    """Handler for GET /api/apartments/{apartment_id}/availability"""

    def get(self, request: Request, apartment_id: str) -> Response:
        try:
            query = parse(AvailabilityQuerySerializer, request.query_params)
            view = async_to_sync(wiring.booking_service().availability)(
                apartment_id, query.get("year"), query.get("month")
            )
        except DomainError as error:
            return error_response(error)
        return Response(AvailabilitySerializer(view).data)


class QuoteView(APIView):
    """Handler for POST /api/apartments/{apartment_id}/quote"""

    def post(self, request: Request, apartment_id: str) -> Response:
        try:
            draft = DraftInput(**parse(DraftSerializer, request.data))
            price = async_to_sync(wiring.booking_service().quote)(apartment_id, draft)
        except DomainError as error:
            return error_response(error)
        return Response(PriceQuoteSerializer(price).data)


class CheckoutView(APIView):
    """Handler for POST /api/apartments/{apartment_id}/checkout"""

    def post(self, request: Request, apartment_id: str) -> Response:
        try:
            draft = DraftInput(**parse(DraftSerializer, request.data))
            url = async_to_sync(wiring.booking_service().checkout)(apartment_id, draft)
        except DomainError as error:
            logger.info("Checkout rejected for %s: %s", apartment_id, error)
            return error_response(error)
        return Response({"redirect_url": url}, status=status.HTTP_201_CREATED)


class CouponValidateView(APIView):
    """Handler for POST /api/coupons/validate"""

    def post(self, request: Request) -> Response:
        try:
            code = parse(CouponCodeSerializer, request.data)["code"]
            coupon = async_to_sync(wiring.booking_service().validate_coupon)(code)
        except DomainError as error:
            return error_response(error)
        return Response(CouponSerializer(coupon).data)
