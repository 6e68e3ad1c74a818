"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.meta.router import router as meta_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # Health e info na raiz (/health, /)
    api_router.include_router(health_router, tags=["health"])

    # Webhook único para WhatsApp e Instagram
    api_router.include_router(meta_router, tags=["meta"])

    return api_router
