"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, valida settings e conecta os
clientes concretos ao handler de conversa.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.bootstrap.clients import create_outbound_clients
from app.observability import get_correlation_id
from app.use_cases.meta import ConversationHandler
from config.logging import configure_logging
from config.settings import get_base_settings, get_meta_settings

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.constants.meta import Platform
    from app.protocols.outbound_client import OutboundClientProtocol

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging com correlation_id. Chamar uma vez no startup."""
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
        json_output=base.json_logs,
        environment=base.environment,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Configuração inválida em ambiente estrito
    """
    base = get_base_settings()
    environment = base.environment
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"meta: {error}" for error in get_meta_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


def create_conversation_handler(
    clients: Mapping[Platform, OutboundClientProtocol] | None = None,
) -> ConversationHandler:
    """Handler de conversa com um cliente por plataforma configurada.

    Args:
        clients: Mapa já construído; se None, cria a partir das settings.
    """
    if clients is None:
        clients = create_outbound_clients(get_meta_settings())
    return ConversationHandler(clients)


__all__ = [
    "create_conversation_handler",
    "create_outbound_clients",
    "initialize_app",
    "validate_runtime_settings",
]
