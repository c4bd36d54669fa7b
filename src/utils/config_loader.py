"""
Configuration loader for the payment server
"""

import os
from pathlib import Path
from typing import Literal, Mapping, Optional
from pydantic import BaseModel, Field, ValidationError
import logging

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000


class ConfigError(RuntimeError):
    """Raised when the environment does not describe a runnable server"""


class PaymentServerConfig(BaseModel):
    """Process-wide settings, read once at startup"""

    model_config = {"frozen": True}

    stripe_secret_key: Optional[str] = None
    stripe_publishable_key: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    static_dir: Path = Path("public")
    integrations_mode: Literal["auto", "real", "mock"] = "auto"
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    service_name: str = "stripe-payment-server"

    def use_real_payments(self) -> bool:
        # Only an explicit mock/test mode swaps Stripe out; a missing key surfaces as a Stripe error.
        return self.integrations_mode != "mock"


def _optional(value: Optional[str]) -> Optional[str]:
    # Unset and blank are the same thing; the public key is still returned as-is (None).
    value = (value or "").strip()
    return value or None


def _integrations_mode(value: Optional[str]) -> str:
    mode = (value or "").strip().lower()
    if mode in {"real", "live"}:
        return "real"
    if mode in {"mock", "test"}:
        return "mock"
    if mode in {"", "auto"}:
        return "auto"
    raise ConfigError(f"INTEGRATIONS_MODE='{value}' is not one of real, live, mock, test, auto")


def _csv(value: Optional[str]) -> list[str]:
    items = [part.strip() for part in (value or "").split(",") if part.strip()]
    return items or ["*"]


def load_server_config(environ: Optional[Mapping[str, str]] = None) -> PaymentServerConfig:
    """
    Build and validate the server configuration from environment variables

    Args:
        environ: Mapping to read from. Defaults to os.environ

    Returns:
        Validated PaymentServerConfig object

    Raises:
        ConfigError: If a value is present but unusable (e.g. PORT=abc)
    """
    env = os.environ if environ is None else environ

    data = {
        "stripe_secret_key": _optional(env.get("STRIPE_SECRET_KEY")),
        "stripe_publishable_key": _optional(env.get("STRIPE_PUBLISHABLE_KEY")),
        "host": (env.get("HOST") or "0.0.0.0").strip(),
        "port": (env.get("PORT") or "").strip() or DEFAULT_PORT,
        "static_dir": (env.get("STATIC_DIR") or "public").strip(),
        "integrations_mode": _integrations_mode(env.get("INTEGRATIONS_MODE")),
        "cors_allow_origins": _csv(env.get("CORS_ALLOW_ORIGINS")),
        "log_level": (env.get("LOG_LEVEL") or "INFO").strip().upper(),
    }

    try:
        config = PaymentServerConfig(**data)
    except ValidationError as e:
        logger.error("Server config validation failed: %s", e)
        raise ConfigError(f"Invalid server configuration: {e}") from e

    if config.stripe_publishable_key is None:
        logger.warning("STRIPE_PUBLISHABLE_KEY is not set; /stripe-public-key will return null")
    if config.use_real_payments() and not config.stripe_secret_key:
        logger.warning("STRIPE_SECRET_KEY is not set; /create-payment-intent will return Stripe's authentication error")

    return config
