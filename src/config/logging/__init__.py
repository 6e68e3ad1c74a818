"""Logging estruturado da ponte de webhooks.

Bootstrap chama configure_logging() uma vez; módulos usam
logging.getLogger(__name__) e mensagens em formato de evento:

    logger.info("webhook_received", extra={"object": "instagram"})

Todo record leva correlation_id e service. Tokens, secrets, telefones
e texto de mensagens não entram em log.
"""

from config.logging.config import (
    QUIET_LOGGERS,
    configure_logging,
    get_logger,
    log_fallback,
)
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    PLAIN_LOG_FORMAT,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
    create_plain_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "PLAIN_LOG_FORMAT",
    "QUIET_LOGGERS",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "create_plain_formatter",
    "get_logger",
    "log_fallback",
]
