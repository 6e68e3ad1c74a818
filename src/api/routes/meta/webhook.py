"""Endpoints de webhook Meta (WhatsApp e Instagram).

Endpoints:
- GET /webhook: verificação de webhook (Meta challenge)
- POST /webhook: recebimento de eventos

Segurança:
- HMAC-SHA256 sob o app secret ou o IG app secret
- Assinatura inválida: 401; JSON inválido: 400
- Demais casos: 200 "EVENT_RECEIVED" imediato para evitar reentrega
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import PlainTextResponse

from api.connectors.meta.webhook.receive import (
    InvalidJsonError,
    InvalidSignatureError,
    parse_webhook_request,
)
from api.connectors.meta.webhook.verify import (
    HubChallenge,
    WebhookChallengeError,
    verify_webhook_challenge,
)
from api.routes.meta.webhook_runtime import dispatch_inbound_processing
from app.observability import correlation_scope, get_correlation_id
from config.settings import get_meta_settings

logger = logging.getLogger(__name__)

router = APIRouter()

EVENT_RECEIVED = "EVENT_RECEIVED"


def _app_state(request: Request, name: str) -> Any:
    """Objeto criado no lifespan (None fora da aplicação)."""
    app = request.scope.get("app")
    state = getattr(app, "state", None)
    return getattr(state, name, None)


@router.get("")
async def verify_webhook(request: Request) -> Response:
    """Responde ao handshake da Meta.

    Returns:
        hub.challenge em texto puro, ou 403 sem ecoar o challenge.
    """
    settings = get_meta_settings()
    hub = HubChallenge.from_query(request.query_params)

    try:
        challenge = verify_webhook_challenge(hub, settings.verify_token)
    except WebhookChallengeError as exc:
        logger.warning(
            "webhook_verification_failed",
            extra={"hub_mode": hub.mode, "error": str(exc)},
        )
        return PlainTextResponse("Forbidden", status_code=status.HTTP_403_FORBIDDEN)

    logger.info("webhook_verified", extra={"hub_mode": hub.mode})
    return PlainTextResponse(challenge, status_code=status.HTTP_200_OK)


@router.post("")
async def receive_webhook(request: Request) -> Response:
    """Recebe eventos da Meta e confirma com 200 "EVENT_RECEIVED".

    O processamento (normalização, dispatch e chamadas outbound) não
    altera a resposta.
    """
    with correlation_scope(request.headers.get("x-correlation-id")):
        settings = get_meta_settings()
        raw_body = await request.body()

        try:
            payload, signature_result = parse_webhook_request(
                raw_body,
                dict(request.headers),
                settings.signature_secrets,
                require_signature=settings.require_signature,
            )
        except InvalidSignatureError as exc:
            logger.warning(
                "webhook_signature_invalid",
                extra={"correlation_id": get_correlation_id(), "error": str(exc)},
            )
            return PlainTextResponse("Unauthorized", status_code=status.HTTP_401_UNAUTHORIZED)
        except InvalidJsonError as exc:
            logger.warning(
                "webhook_json_invalid",
                extra={"correlation_id": get_correlation_id(), "error": str(exc)},
            )
            return PlainTextResponse("Bad Request", status_code=status.HTTP_400_BAD_REQUEST)

        logger.info(
            "webhook_received",
            extra={
                "correlation_id": get_correlation_id(),
                "object": payload.get("object") if isinstance(payload, dict) else None,
                "signature_valid": signature_result.valid,
                "signature_skipped": signature_result.skipped,
                "payload_size": len(raw_body),
            },
        )

        await dispatch_inbound_processing(
            payload=payload,
            correlation_id=get_correlation_id(),
            handler=_app_state(request, "conversation_handler"),
            processing_mode=settings.webhook_processing_mode,
            task_pool=_app_state(request, "task_pool"),
        )
        return PlainTextResponse(EVENT_RECEIVED, status_code=status.HTTP_200_OK)
