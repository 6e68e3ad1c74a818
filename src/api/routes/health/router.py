"""Endpoints de liveness e informação do serviço."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter
from pydantic import BaseModel

from config.settings import get_base_settings

router = APIRouter()

SERVICE_ENDPOINTS = (
    "GET /webhook - Meta webhook verification",
    "POST /webhook - WhatsApp and Instagram webhook events",
    "GET /health - Liveness probe",
)


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    message: str
    service: str
    timestamp: str


class ServiceInfoResponse(BaseModel):
    """Resposta da rota raiz."""

    message: str
    endpoints: list[str]


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="ok",
        message="Server is running",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/", response_model=ServiceInfoResponse)
async def service_info() -> ServiceInfoResponse:
    return ServiceInfoResponse(
        message="Meta webhook bridge is running",
        endpoints=list(SERVICE_ENDPOINTS),
    )
