"""
Integrations layer.
This package contains all code used to communicate with the payment provider (Stripe).

Key rule:
- HTTP handlers MUST NOT call the Stripe SDK directly.
- Handlers go through PaymentService (src/integrations/policy), which calls a
  PaymentProvider client (under src/integrations/clients).
- The MOCK client is used only when INTEGRATIONS_MODE is mock/test; the Stripe client otherwise.

Switching implementations:
- The selection of mock vs real clients happens in ONE place (src/api/main.py).
"""

from .contracts.interfaces import (
    PaymentIntentRequest,
    PaymentIntentResult,
    PaymentProvider,
    Provider,
)
from .contracts.payments import (
    FIXED_AMOUNT,
    FIXED_CURRENCY,
    FIXED_PAYMENT_METHOD_TYPES,
    ProviderCallResult,
    ProviderError,
    build_fixed_intent_request,
)

__all__ = [
    # interfaces
    "PaymentIntentRequest", "PaymentIntentResult",
    "PaymentProvider", "Provider",
    # payments
    "FIXED_AMOUNT", "FIXED_CURRENCY", "FIXED_PAYMENT_METHOD_TYPES",
    "ProviderCallResult", "ProviderError", "build_fixed_intent_request",
]
