"""Setup do logging do processo.

Um único handler no root logger: JSON (python-json-logger) por padrão,
texto legível quando LOG_FORMAT=plain. Bibliotecas HTTP ficam em
WARNING para não registrar URLs da Graph API a cada chamada.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter, create_plain_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "meta_webhook_bridge"

# Loggers de terceiros limitados a WARNING
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    json_output: bool = True,
    environment: str | None = None,
) -> None:
    """Instala o handler do root logger.

    Chamada pelo bootstrap antes de criar a aplicação. Chamadas
    repetidas substituem o handler anterior.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (case-insensitive).
        service_name: Valor do campo `service` em todo record.
        correlation_id_getter: Fonte do `correlation_id` (ContextVar da
            requisição em app/observability).
        json_output: False troca o JSON por texto simples.
        environment: Valor do campo `environment` (omitido se None).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    normalized_level = level.upper()
    if normalized_level not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(normalized_level)
    handler.setFormatter(create_json_formatter() if json_output else create_plain_formatter())
    handler.addFilter(
        CorrelationIdFilter(
            service_name,
            correlation_id_getter,
            environment=environment,
        )
    )

    root = logging.getLogger()
    root.setLevel(normalized_level)
    root.handlers = [handler]

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Atalho para logging.getLogger (mantém imports uniformes)."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
) -> None:
    """Registra uso de caminho de fallback (ex: resposta padrão).

    Args:
        logger: Logger do módulo chamador.
        component: Componente que caiu no fallback (ex: "reply_catalog").
        reason: Motivo curto, sem PII (ex: "unhandled_type:instagram").
    """
    extra: dict[str, object] = {"fallback_used": True, "component": component}
    if reason:
        extra["reason"] = reason
    logger.info("Fallback applied for %s", component, extra=extra)
