"""
Payment Service

Wraps a PaymentProvider call so that the HTTP layer receives a
ProviderCallResult instead of an exception. No retries: every failure is
reported as-is.
"""

import logging
from typing import Optional

from src.error_handler import ErrorHandler
from src.integrations.contracts.interfaces import PaymentIntentRequest, PaymentProvider
from src.integrations.contracts.payments import ProviderCallResult, build_fixed_intent_request

logger = logging.getLogger(__name__)


class PaymentService:
    def __init__(self, client: PaymentProvider, error_handler: Optional[ErrorHandler] = None):
        self.client = client
        self.error_handler = error_handler or ErrorHandler()

    def create_payment_intent(self, request: Optional[PaymentIntentRequest] = None) -> ProviderCallResult:
        request = request or build_fixed_intent_request()
        try:
            result = self.client.create_payment_intent(request)
        except Exception as e:
            error = self.error_handler.handle_provider_exception(
                e,
                context={"provider": self.client.provider.value, "amount": request.amount, "currency": request.currency},
            )
            return ProviderCallResult.failure(error)
        return ProviderCallResult.success(result)
