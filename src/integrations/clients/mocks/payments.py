"""
Mock Payments Client.

Purpose:
- Stands in for Stripe during local frontend work
- Does NOT make any network calls
- Every call yields a fresh intent id and client secret, like the real API

Swap:
Selected by src/api/main.py only when INTEGRATIONS_MODE is mock/test.
"""

import logging
import uuid
from typing import Optional

from src.integrations.contracts.interfaces import (
    PaymentIntentRequest,
    PaymentIntentResult,
    PaymentProvider,
    Provider,
)

logger = logging.getLogger(__name__)


class MockPaymentsClient(PaymentProvider):
    """
    Args:
        fail_with: when set, every call raises RuntimeError with this message
    """

    def __init__(self, fail_with: Optional[str] = None) -> None:
        self.fail_with = fail_with
        self.requests: list[PaymentIntentRequest] = []

    @property
    def provider(self) -> Provider:
        return Provider.MOCK

    def create_payment_intent(self, request: PaymentIntentRequest) -> PaymentIntentResult:
        self.requests.append(request)
        if self.fail_with:
            raise RuntimeError(self.fail_with)

        intent_id = f"pi_mock_{uuid.uuid4().hex[:24]}"
        secret = f"{intent_id}_secret_{uuid.uuid4().hex[:16]}"
        logger.info("[MOCK] Created payment intent %s (%s %s)", intent_id, request.amount, request.currency)
        return PaymentIntentResult(client_secret=secret, intent_id=intent_id)
