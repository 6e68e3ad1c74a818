"""Factories dos clientes outbound por plataforma.

O mapa é construído uma vez no startup e guardado em app.state; handlers
o recebem por injeção, nunca por lookup global.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.meta import create_meta_graph_client
from app.constants.meta import Platform

if TYPE_CHECKING:
    from app.protocols.outbound_client import OutboundClientProtocol
    from config.settings import MetaSettings

logger = logging.getLogger(__name__)


def create_outbound_clients(settings: MetaSettings) -> dict[Platform, OutboundClientProtocol]:
    """Cria um cliente por plataforma com access token configurado.

    Plataforma sem token fica fora do mapa; mensagens dela são logadas
    e descartadas pelo handler.
    """
    tokens = {
        Platform.WHATSAPP: settings.whatsapp_access_token,
        Platform.INSTAGRAM: settings.instagram_access_token,
    }
    clients: dict[Platform, OutboundClientProtocol] = {}
    for platform, token in tokens.items():
        if not token:
            logger.warning(
                "outbound_client_not_configured",
                extra={"component": "bootstrap", "platform": platform.value},
            )
            continue
        clients[platform] = create_meta_graph_client(platform, settings)

    logger.info(
        "outbound_clients_ready",
        extra={"component": "bootstrap", "platforms": sorted(p.value for p in clients)},
    )
    return clients
