"""Runtime do processamento de webhooks Meta (inline ou em background)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.coordinators.meta import DispatchResult, dispatch_webhook_payload

if TYPE_CHECKING:
    from api.routes.meta.webhook_runtime_tasks import ProcessingTaskPool
    from app.protocols.event_handler import EventHandlerProtocol

logger = logging.getLogger(__name__)


async def process_payload_safe(
    *,
    payload: Any,
    correlation_id: str,
    handler: EventHandlerProtocol,
) -> DispatchResult | None:
    """Despacha o payload sem propagar exceções (a resposta já foi enviada)."""
    try:
        return await dispatch_webhook_payload(payload, handler)
    except Exception:
        logger.exception(
            "webhook_processing_failed",
            extra={"correlation_id": correlation_id},
        )
        return None


async def dispatch_inbound_processing(
    *,
    payload: Any,
    correlation_id: str,
    handler: EventHandlerProtocol | None,
    processing_mode: str = "async",
    task_pool: ProcessingTaskPool | None = None,
) -> None:
    """Processa inline ou agenda em background conforme configuração.

    Sem task_pool (fora do lifespan) o modo async cai para inline.
    """
    if handler is None:
        logger.warning(
            "webhook_handler_unavailable",
            extra={"correlation_id": correlation_id},
        )
        return

    inline = (processing_mode or "async").lower() == "inline"
    if not inline and task_pool is None:
        logger.warning(
            "webhook_task_pool_unavailable",
            extra={"correlation_id": correlation_id},
        )

    if inline or task_pool is None:
        await process_payload_safe(
            payload=payload,
            correlation_id=correlation_id,
            handler=handler,
        )
        logger.info(
            "webhook_processing_completed",
            extra={"correlation_id": correlation_id, "mode": "inline"},
        )
        return

    task_pool.schedule(
        process_payload_safe(
            payload=payload,
            correlation_id=correlation_id,
            handler=handler,
        ),
        correlation_id=correlation_id,
    )
