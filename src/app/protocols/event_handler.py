"""Protocolo do handler invocado pelo dispatcher."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.constants.meta import Platform

    from .models import NormalizedMessage, NormalizedStatus


class EventHandlerProtocol(Protocol):
    """Recebe eventos normalizados, um por chamada."""

    async def handle_message(
        self,
        platform: Platform,
        business_id: str | None,
        message: NormalizedMessage,
    ) -> None: ...

    async def handle_status(
        self,
        platform: Platform,
        business_id: str | None,
        status: NormalizedStatus,
    ) -> None: ...
