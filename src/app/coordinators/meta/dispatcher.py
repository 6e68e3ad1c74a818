"""Dispatcher: entrega cada evento normalizado ao handler certo.

Eventos do mesmo payload são tratados em ordem; a falha de um handler
é logada e não interrompe os demais.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from api.normalizers.meta import IgnoredEvent, RoutedEvent, route_webhook_payload
from app.protocols.models import NormalizedMessage

if TYPE_CHECKING:
    from app.protocols.event_handler import EventHandlerProtocol

logger = logging.getLogger(__name__)


@dataclass
class DispatchResult:
    """Resumo do processamento de um payload."""

    messages: int = 0
    statuses: int = 0
    failed: int = 0
    ignored: list[IgnoredEvent] = field(default_factory=list)

    @property
    def handled(self) -> int:
        return self.messages + self.statuses


async def dispatch_webhook_payload(
    payload: Any,
    handler: EventHandlerProtocol,
) -> DispatchResult:
    """Roteia o payload e invoca o handler para cada evento folha.

    Args:
        payload: Corpo JSON do webhook
        handler: Handler de mensagens/status

    Returns:
        DispatchResult (object desconhecido resulta em um IgnoredEvent)
    """
    result = DispatchResult()

    for outcome in route_webhook_payload(payload):
        if isinstance(outcome, IgnoredEvent):
            result.ignored.append(outcome)
            logger.debug(
                "webhook_event_ignored",
                extra={"reason": outcome.reason, "object": outcome.kind},
            )
            continue

        if await _deliver(outcome, handler):
            if isinstance(outcome.event, NormalizedMessage):
                result.messages += 1
            else:
                result.statuses += 1
        else:
            result.failed += 1

    logger.info(
        "webhook_dispatched",
        extra={
            "messages": result.messages,
            "statuses": result.statuses,
            "failed": result.failed,
            "ignored": len(result.ignored),
        },
    )
    return result


async def _deliver(routed: RoutedEvent, handler: EventHandlerProtocol) -> bool:
    try:
        if isinstance(routed.event, NormalizedMessage):
            await handler.handle_message(routed.platform, routed.business_id, routed.event)
        else:
            await handler.handle_status(routed.platform, routed.business_id, routed.event)
    except Exception:
        logger.exception(
            "webhook_event_handler_failed",
            extra={"platform": routed.platform.value, "business_id": routed.business_id},
        )
        return False
    return True
