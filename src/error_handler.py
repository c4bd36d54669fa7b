"""Error handling helpers for payment provider calls."""
from typing import Any, Dict
import logging

import stripe

from src.integrations.contracts.payments import ProviderError

logger = logging.getLogger(__name__)


def error_message(exc: Exception) -> str:
    # StripeError.__str__ prefixes the request id; the browser only needs the message.
    if isinstance(exc, stripe.StripeError):
        return exc.user_message or str(exc)
    return str(exc)


class ErrorHandler:
    def handle_provider_exception(self, exc: Exception, context: Dict[str, Any] = None) -> ProviderError:
        logger.error("Payment provider call failed: %s (context=%s)", exc, context or {}, exc_info=exc)
        return ProviderError(message=error_message(exc), error_type=type(exc).__name__)
