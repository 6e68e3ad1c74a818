"""Protocolos de envio outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.constants.meta import Platform

    from .models import ReplyContent


class OutboundClientProtocol(Protocol):
    """Contrato do cliente outbound de uma plataforma.

    Cada chamada é independente e pode falhar isoladamente.
    """

    platform: Platform

    async def send_reply(
        self,
        business_id: str,
        recipient_id: str,
        content: ReplyContent,
    ) -> dict[str, Any]: ...

    async def mark_as_read(
        self,
        business_id: str,
        message_id: str | None,
        recipient_id: str | None = None,
    ) -> dict[str, Any]: ...
