"""
FastAPI application - Main entry point
"""

import argparse
import logging
import os
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from src.api.endpoints.payments import payments_api
from src.integrations.clients.mocks.payments import MockPaymentsClient
from src.integrations.clients.real_http.payments import StripePaymentsClient
from src.integrations.contracts.interfaces import PaymentProvider
from src.integrations.policy.payment_service import PaymentService
from src.utils.config_loader import ConfigError, PaymentServerConfig, load_server_config

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


def select_payment_client(config: PaymentServerConfig) -> PaymentProvider:
    """The one place where mock vs real payment clients are chosen."""
    if config.use_real_payments():
        logger.info("Using Stripe payment client")
        return StripePaymentsClient(secret_key=config.stripe_secret_key)
    logger.warning("Using MOCK payment client; no Stripe calls will be made")
    return MockPaymentsClient()


def create_app(
    config: Optional[PaymentServerConfig] = None,
    payment_client: Optional[PaymentProvider] = None,
) -> FastAPI:
    if not logging.getLogger().handlers:
        # uvicorn's reloader builds the app in a subprocess where main() never ran.
        setup_logging(config.log_level if config else os.getenv("LOG_LEVEL", "INFO"))
    config = config or load_server_config()
    payment_client = payment_client or select_payment_client(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Server running on port %s", config.port)
        yield
        logger.info("Shutting down payment server...")

    app = FastAPI(
        title="Stripe Payment Server",
        description="Exposes the Stripe publishable key and creates payment intents",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.payment_service = PaymentService(payment_client)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_allow_origins,
        allow_credentials="*" not in config.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(payments_api)

    # Mounted last so the API routes above take precedence.
    if config.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=config.static_dir, html=True), name="static")
        logger.info("Serving static files from %s", config.static_dir)
    else:
        logger.warning("Static directory %s not found; serving API routes only", config.static_dir)

    return app


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Stripe payment server")
    parser.add_argument("--host", default=None, help="Bind host (overrides HOST)")
    parser.add_argument("--port", type=int, default=None, help="Bind port (overrides PORT)")
    parser.add_argument("--reload", action="store_true", help="Auto-reload on code changes")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    load_dotenv()
    args = parse_args(argv)
    setup_logging("DEBUG" if args.verbose else os.getenv("LOG_LEVEL", "INFO"))

    try:
        config = load_server_config()
    except ConfigError as e:
        logger.error("%s", e)
        return 1

    overrides = {}
    if args.host is not None:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if overrides:
        try:
            config = PaymentServerConfig(**{**config.model_dump(), **overrides})
        except ValueError as e:
            logger.error("Invalid command line override: %s", e)
            return 1

    if args.reload:
        # The reloader re-imports the app from the environment, so pass overrides through it.
        os.environ["HOST"] = config.host
        os.environ["PORT"] = str(config.port)
        uvicorn.run("src.api.main:create_app", factory=True, host=config.host, port=config.port, reload=True)
    else:
        uvicorn.run(create_app(config), host=config.host, port=config.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
