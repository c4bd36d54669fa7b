"""
Payment contracts.

Defines the request/response structures for creating a payment intent.

These contracts must be used by both:
- clients/mocks/payments.py (fake intents for development/testing)
- clients/real_http/payments.py (real Stripe calls)
"""

from dataclasses import dataclass
from typing import Optional

from .interfaces import PaymentIntentRequest, PaymentIntentResult


# ---------------------------------------------------------------------------
# Fixed charge
# ---------------------------------------------------------------------------

FIXED_AMOUNT = 1000
FIXED_CURRENCY = "usd"
FIXED_PAYMENT_METHOD_TYPES = ("card",)


def build_fixed_intent_request() -> PaymentIntentRequest:
    """The only charge this server creates; nothing comes from the client."""
    return PaymentIntentRequest(
        amount=FIXED_AMOUNT,
        currency=FIXED_CURRENCY,
        payment_method_types=list(FIXED_PAYMENT_METHOD_TYPES),
    )


# ---------------------------------------------------------------------------
# Provider call outcome
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProviderError:
    """What the HTTP layer gets to know about a failed provider call."""
    message: str
    error_type: str = "Exception"


@dataclass(frozen=True)
class ProviderCallResult:
    value: Optional[PaymentIntentResult] = None
    error: Optional[ProviderError] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("ProviderCallResult needs exactly one of value or error")

    @classmethod
    def success(cls, value: PaymentIntentResult) -> "ProviderCallResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ProviderError) -> "ProviderCallResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None
