from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Provider(str, Enum):
    STRIPE = "STRIPE"
    MOCK = "MOCK"


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PaymentIntentRequest:
    amount: int                          # smallest currency unit, e.g. 1000 = $10.00
    currency: str
    payment_method_types: List[str] = field(default_factory=lambda: ["card"])


@dataclass(frozen=True)
class PaymentIntentResult:
    client_secret: str
    intent_id: Optional[str] = None      # logged only, never returned to the browser


# ---------------------------------------------------------------------------
# Abstract provider interface
# ---------------------------------------------------------------------------

class PaymentProvider(ABC):
    """Every payment provider client must implement this interface."""

    @property
    @abstractmethod
    def provider(self) -> Provider:
        """Return the provider enum value."""

    @abstractmethod
    def create_payment_intent(self, request: PaymentIntentRequest) -> PaymentIntentResult:
        """Create one provider-side payment intent and return its client secret."""
