from bookings.checkout.interfaces import CheckoutHandoff, CheckoutRequest
from bookings.checkout.stripe_handoff import StripeCheckoutHandoff

__all__ = ["CheckoutHandoff", "CheckoutRequest", "StripeCheckoutHandoff"]
