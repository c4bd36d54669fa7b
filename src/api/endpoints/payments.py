import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.integrations.contracts.payments import ProviderCallResult
from src.integrations.policy.payment_service import PaymentService
from src.utils.config_loader import PaymentServerConfig

logger = logging.getLogger(__name__)

api = APIRouter()
payments_api = api


class PublicKeyResponse(BaseModel):
    publicKey: Optional[str] = None


class ClientSecretResponse(BaseModel):
    clientSecret: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
    service: str


def get_config(request: Request) -> PaymentServerConfig:
    return request.app.state.config


def get_payment_service(request: Request) -> PaymentService:
    return request.app.state.payment_service


@api.get("/health", tags=["Health"], response_model=HealthResponse)
async def health(config: PaymentServerConfig = Depends(get_config)):
    return HealthResponse(service=config.service_name)


@api.get("/stripe-public-key", tags=["Payments"], response_model=PublicKeyResponse)
async def stripe_public_key(config: PaymentServerConfig = Depends(get_config)):
    return PublicKeyResponse(publicKey=config.stripe_publishable_key)


@api.post(
    "/create-payment-intent",
    tags=["Payments"],
    response_model=ClientSecretResponse,
    responses={500: {"model": ErrorResponse}},
)
async def create_payment_intent(service: PaymentService = Depends(get_payment_service)):
    # The request body is never read: amount and currency are fixed server-side.
    result: ProviderCallResult = await run_in_threadpool(service.create_payment_intent)
    if not result.ok:
        return JSONResponse(status_code=500, content=ErrorResponse(error=result.error.message).model_dump())
    return ClientSecretResponse(clientSecret=result.value.client_secret)
