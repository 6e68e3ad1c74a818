"""Handler de conversa: marca como lida e responde cada mensagem.

Recebe o mapa plataforma -> cliente outbound construído no startup.
Cada chamada outbound falha de forma isolada e só é logada.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.services.reply_catalog import resolve_reply

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping
    from typing import Any

    from app.constants.meta import Platform
    from app.protocols.models import NormalizedMessage, NormalizedStatus, ReplyContent
    from app.protocols.outbound_client import OutboundClientProtocol

logger = logging.getLogger(__name__)


class ConversationHandler:
    """Implementa EventHandlerProtocol sobre clientes outbound.

    Args:
        clients: Cliente outbound por plataforma
        reply_resolver: Escolhe a resposta para cada mensagem
    """

    def __init__(
        self,
        clients: Mapping[Platform, OutboundClientProtocol],
        reply_resolver: Callable[[NormalizedMessage, Platform], ReplyContent] = resolve_reply,
    ) -> None:
        self._clients = dict(clients)
        self._resolve_reply = reply_resolver

    async def handle_message(
        self,
        platform: Platform,
        business_id: str | None,
        message: NormalizedMessage,
    ) -> None:
        client = self._clients.get(platform)
        if client is None:
            logger.warning(
                "outbound_client_unavailable",
                extra={"platform": platform.value},
            )
            return

        if not business_id or not message.sender_id:
            logger.warning(
                "message_missing_routing_ids",
                extra={
                    "platform": platform.value,
                    "has_business_id": bool(business_id),
                    "has_sender_id": bool(message.sender_id),
                },
            )
            return

        logger.info(
            "message_received",
            extra={
                "platform": platform.value,
                "business_id": business_id,
                "message_type": message.type,
            },
        )

        await self._call_outbound(
            platform,
            message.sender_id,
            "mark_as_read",
            lambda: client.mark_as_read(business_id, message.id, message.sender_id),
        )

        reply = self._resolve_reply(message, platform)
        await self._call_outbound(
            platform,
            message.sender_id,
            "send_reply",
            lambda: client.send_reply(business_id, message.sender_id, reply),
        )

    async def handle_status(
        self,
        platform: Platform,
        business_id: str | None,
        status: NormalizedStatus,
    ) -> None:
        logger.info(
            "status_received",
            extra={
                "platform": platform.value,
                "business_id": business_id,
                "status": status.status,
            },
        )

    async def _call_outbound(
        self,
        platform: Platform,
        recipient_id: str,
        action: str,
        call: Callable[[], Awaitable[Any]],
    ) -> bool:
        """Executa chamada outbound; falha vira log, nunca exceção."""
        try:
            await call()
        except Exception as exc:
            logger.error(
                "outbound_call_failed",
                extra={
                    "platform": platform.value,
                    "recipient_id": recipient_id,
                    "action": action,
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                },
            )
            return False
        return True
