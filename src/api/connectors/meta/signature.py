"""Validação HMAC-SHA256 do header X-Hub-Signature-256.

A Meta assina o corpo bruto com o app secret. WhatsApp e Instagram podem
usar apps diferentes, então até dois secrets são testados; o segundo só
é comparado se for diferente do primeiro.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import string
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.constants.meta import SIGNATURE_ALGORITHM, SIGNATURE_HEADER

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

logger = logging.getLogger(__name__)

_HEX_DIGEST_LENGTH = hashlib.sha256().digest_size * 2


@dataclass(frozen=True)
class SignatureResult:
    """Resultado da verificação de assinatura.

    Attributes:
        valid: True se o request pode prosseguir
        skipped: True se prosseguiu sem verificação (header/secret ausente)
        error: Código do erro quando valid é False
        matched_secret_index: Índice do secret que validou (0 = principal)
    """

    valid: bool
    skipped: bool = False
    error: str | None = None
    matched_secret_index: int | None = None


def compute_signature(raw_body: bytes, secret: str) -> str:
    """Calcula o hex digest HMAC-SHA256 do corpo com o secret."""
    return hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha256).hexdigest()


def verify_meta_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secrets: Sequence[str] | str | None,
    *,
    require_signature: bool = True,
) -> SignatureResult:
    """Verifica a assinatura do webhook contra os secrets candidatos.

    Args:
        raw_body: Corpo bruto do request (exatamente como recebido)
        headers: Headers recebidos
        secrets: Secret único ou lista de secrets candidatos
        require_signature: False deixa passar request sem header ou sem
            secret configurado (apenas loga warning)

    Returns:
        SignatureResult
    """
    candidates = _unique_secrets(secrets)
    if not candidates:
        logger.warning("webhook_signature_secret_missing", extra={"required": require_signature})
        if require_signature:
            return SignatureResult(valid=False, error="missing_secret")
        return SignatureResult(valid=True, skipped=True)

    header_value = _get_header(headers, SIGNATURE_HEADER)
    if not header_value:
        logger.warning(
            "webhook_signature_header_missing",
            extra={"header": SIGNATURE_HEADER, "required": require_signature},
        )
        if require_signature:
            return SignatureResult(valid=False, error="missing_signature_header")
        return SignatureResult(valid=True, skipped=True)

    algorithm, _, received = header_value.strip().partition("=")
    if algorithm.lower() != SIGNATURE_ALGORITHM or not received:
        return SignatureResult(valid=False, error="malformed_signature_header")

    received = received.lower()
    if len(received) != _HEX_DIGEST_LENGTH or any(c not in string.hexdigits for c in received):
        return SignatureResult(valid=False, error="malformed_signature_header")

    for index, secret in enumerate(candidates):
        if hmac.compare_digest(compute_signature(raw_body, secret), received):
            return SignatureResult(valid=True, matched_secret_index=index)

    logger.error(
        "webhook_signature_mismatch",
        extra={
            "secrets_tried": [_mask_secret(secret) for secret in candidates],
            "payload_size": len(raw_body),
        },
    )
    return SignatureResult(valid=False, error="signature_mismatch")


def _unique_secrets(secrets: Sequence[str] | str | None) -> list[str]:
    if not secrets:
        return []
    if isinstance(secrets, str):
        secrets = (secrets,)
    unique: list[str] = []
    for secret in secrets:
        if secret and secret not in unique:
            unique.append(secret)
    return unique


def _get_header(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is not None:
        return value
    for key, candidate in headers.items():
        if key.lower() == name:
            return candidate
    return None


def _mask_secret(secret: str) -> str:
    return f"{secret[:4]}..."
