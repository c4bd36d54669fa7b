"""
Stripe Payments Client.

Used unless INTEGRATIONS_MODE is mock/test. The key is passed with every
request instead of being assigned to ``stripe.api_key``, so several clients
(or a test double) can coexist in one process.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import stripe

from src.integrations.contracts.interfaces import (
    PaymentIntentRequest,
    PaymentIntentResult,
    PaymentProvider,
    Provider,
)

logger = logging.getLogger(__name__)


class StripePaymentsClient(PaymentProvider):
    def __init__(self, secret_key: Optional[str], stripe_module: Any = None) -> None:
        self.secret_key = secret_key
        self._stripe = stripe_module or stripe

    @property
    def provider(self) -> Provider:
        return Provider.STRIPE

    def create_payment_intent(self, request: PaymentIntentRequest) -> PaymentIntentResult:
        intent = self._stripe.PaymentIntent.create(
            api_key=self.secret_key,
            amount=request.amount,
            currency=request.currency,
            payment_method_types=list(request.payment_method_types),
        )
        logger.info("Created Stripe payment intent %s", intent.id)
        return PaymentIntentResult(client_secret=intent.client_secret, intent_id=intent.id)
