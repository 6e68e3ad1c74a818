"""Validação de assinatura e parse do corpo do webhook (sem PII)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from ..signature import SignatureResult, verify_meta_signature

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidSignatureError(WebhookRequestError):
    """Assinatura ausente ou inválida sob todos os secrets."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no payload do webhook."""


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secrets: Sequence[str] | str | None,
    *,
    require_signature: bool = True,
) -> tuple[Any, SignatureResult]:
    """Valida assinatura e parseia JSON do webhook.

    A assinatura é verificada antes do parse: nada do corpo é lido se
    ela falhar.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos
        secrets: Secrets candidatos (app secret e IG app secret)
        require_signature: Ver verify_meta_signature

    Raises:
        InvalidSignatureError: Se assinatura for inválida
        InvalidJsonError: Se o corpo não for JSON decodificável

    Returns:
        (payload JSON, SignatureResult). Um payload que não é objeto segue
        adiante e vira IgnoredEvent no roteamento.
    """
    signature_result = verify_meta_signature(
        raw_body,
        headers,
        secrets,
        require_signature=require_signature,
    )
    if not signature_result.valid:
        raise InvalidSignatureError(signature_result.error or "invalid_signature")

    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    return payload, signature_result
