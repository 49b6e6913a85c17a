# thelook/payments.py

"""
Stripe payment integration for booking payments.
"""

import logging

import stripe
from stripe import PaymentIntent

logger = logging.getLogger(__name__)

# booking price -> gateway amount
PRICE_SCALE = 1000


def to_gateway_amount(price: float) -> int:
    return int(round(price * PRICE_SCALE))


class PaymentGateway:
    """
    Thin wrapper around the Stripe PaymentIntent API.

    One instance is built at startup with the secret key from settings and
    shared by every request; it holds no other state.
    """

    def __init__(self, secret_key: str, currency: str = "usd"):
        self.secret_key = secret_key
        self.currency = currency

    def create_payment_intent(self, price: float) -> PaymentIntent:
        """
        Create a card PaymentIntent for a booking price.

        Args:
            price: Booking price as sent by the client

        Returns:
            Stripe PaymentIntent object

        Raises:
            stripe.StripeError: If the Stripe API call fails
        """
        amount = to_gateway_amount(price)
        payment_intent = stripe.PaymentIntent.create(
            api_key=self.secret_key,
            amount=amount,
            currency=self.currency,
            payment_method_types=["card"],
        )
        logger.info("Created payment intent %s for amount %s", payment_intent.id, amount)
        return payment_intent
