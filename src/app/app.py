"""Entrypoint da ponte de webhooks Meta.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from api.routes.meta.webhook_runtime_tasks import ProcessingTaskPool
from app.bootstrap import (
    create_conversation_handler,
    create_outbound_clients,
    initialize_app,
    validate_runtime_settings,
)
from config.logging import get_logger
from config.settings import get_base_settings, get_meta_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging antes de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações (falha rápido em staging/production)
    - Constrói o mapa plataforma -> cliente outbound e o handler
    - Cria o pool de processamento em background

    Shutdown:
    - Aguarda o processamento em background pendente
    """
    service_name = get_base_settings().service_name
    logger.info("app_starting", extra={"service": service_name})
    validate_runtime_settings()
    app.state.outbound_clients = create_outbound_clients(get_meta_settings())
    app.state.conversation_handler = create_conversation_handler(app.state.outbound_clients)
    app.state.task_pool = ProcessingTaskPool()

    yield

    logger.info("app_shutting_down", extra={"service": service_name})
    await app.state.task_pool.drain(timeout_seconds=30.0)


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    fastapi_app = FastAPI(
        title="Meta Webhook Bridge",
        description="Ponte entre webhooks WhatsApp/Instagram e a Graph API",
        version="1.0.0",
        lifespan=lifespan,
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": get_base_settings().service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    settings = get_base_settings()
    logger.info("app_listening", extra={"port": settings.port})
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    main()
