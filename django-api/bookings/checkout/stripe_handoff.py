"""Stripe Checkout Session handoff.

Runs on the server, which is the only place the secret key lives.
"""

import logging

import httpx

from bookings.checkout.interfaces import CheckoutHandoff, CheckoutRequest
from bookings.domain.errors import CheckoutFailedError

logger = logging.getLogger(__name__)

SESSIONS_PATH = "/v1/checkout/sessions"


class StripeCheckoutHandoff(CheckoutHandoff):
    """Creates hosted checkout sessions through the Stripe REST API."""

    def __init__(
        self,
        secret_key: str,
        success_url: str,
        cancel_url: str,
        api_base: str = "https://api.stripe.com",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._secret_key = secret_key
        self._success_url = success_url
        self._cancel_url = cancel_url
        self._api_base = api_base.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def create_session(self, request: CheckoutRequest) -> str:
        if not self._secret_key:
            logger.error("Stripe secret key is not configured")
            raise CheckoutFailedError()

        try:
            async with httpx.AsyncClient(
                base_url=self._api_base,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    SESSIONS_PATH,
                    data=self.build_form(request),
                    headers={"Authorization": f"Bearer {self._secret_key}"},
                )
        except httpx.HTTPError:
            logger.exception("Checkout session request failed for %s", request.apartment_key)
            raise CheckoutFailedError()

        if response.is_error:
            logger.error(
                "Stripe rejected checkout session (%s): %s",
                response.status_code,
                response.text,
            )
            raise CheckoutFailedError()

        try:
            payload = response.json()
        except ValueError:
            logger.error("Stripe returned a non-JSON checkout body")
            raise CheckoutFailedError()
        url = payload.get("url") if isinstance(payload, dict) else None
        if not url:
            logger.error("Stripe checkout session has no redirect url")
            raise CheckoutFailedError()

        logger.info("Created checkout session for %s", request.apartment_key)
        return url

    def build_form(self, request: CheckoutRequest) -> dict[str, str]:
        form = {
            "mode": "payment",
            "success_url": self._success_url,
            "cancel_url": self._cancel_url,
            "customer_email": request.guest_email,
            "line_items[0][price_data][currency]": request.currency,
            "line_items[0][price_data][product_data][name]": request.apartment_name,
            "line_items[0][price_data][unit_amount]": str(request.total_minor_units),
            "line_items[0][quantity]": "1",
            "metadata[apartmentId]": str(request.apartment_id),
            "metadata[apartmentName]": request.apartment_key,
            "metadata[checkIn]": request.check_in,
            "metadata[checkOut]": request.check_out,
            "metadata[email]": request.guest_email,
            "metadata[guestName]": request.guest_name,
            "metadata[price]": str(request.total),
            "metadata[nightlyRate]": str(request.nightly_rate_minor_units),
        }
        if request.coupon_code:
            form["metadata[couponCode]"] = request.coupon_code
            form["metadata[discountPercent]"] = str(request.discount_percent)
        return form
