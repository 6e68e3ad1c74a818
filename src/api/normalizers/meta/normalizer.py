"""Normalizer Meta: converte um evento bruto no modelo interno.

Funções puras: mesmo evento de entrada, mesmo resultado. Nunca levantam
exceção por formato inesperado; o pior caso é type "unknown".
"""

from __future__ import annotations

from typing import Any

from app.constants.meta import MESSAGE_TYPE_TEXT, MESSAGE_TYPE_UNKNOWN
from app.protocols.models import NormalizedMessage, NormalizedStatus

from ._extraction_helpers import (
    as_dict,
    extract_button_reply_id,
    extract_direct_text,
    extract_message_id,
    extract_nested_text,
    extract_sender_id,
)


def normalize_message(raw: dict[str, Any]) -> NormalizedMessage:
    """Normaliza uma mensagem WhatsApp ou um evento messaging do Instagram.

    Ordem de resolução do tipo (primeiro que casar):
    1. Resposta de botão interativo: type = id do botão
    2. Campo `text` direto: type = "text"
    3. `message.text` aninhado (Instagram): type = "text"
    4. Caso contrário: type = "unknown"

    Args:
        raw: Mensagem de value.messages[] ou evento de entry.messaging[]

    Returns:
        NormalizedMessage (sender_id pode ser None)
    """
    raw = as_dict(raw)
    message_id = extract_message_id(raw)
    sender_id = extract_sender_id(raw)

    button_id = extract_button_reply_id(raw)
    if button_id is not None:
        return NormalizedMessage(id=message_id, type=button_id, sender_id=sender_id)

    has_text, text = extract_direct_text(raw)
    if has_text:
        return NormalizedMessage(
            id=message_id,
            type=MESSAGE_TYPE_TEXT,
            text=text,
            sender_id=sender_id,
        )

    nested_text = extract_nested_text(raw)
    if nested_text is not None:
        return NormalizedMessage(
            id=message_id,
            type=MESSAGE_TYPE_TEXT,
            text=nested_text,
            sender_id=sender_id,
        )

    return NormalizedMessage(id=message_id, type=MESSAGE_TYPE_UNKNOWN, sender_id=sender_id)


def normalize_status(recipient_id: str | None, raw: dict[str, Any]) -> NormalizedStatus:
    """Embrulha um evento de status sem alterá-lo."""
    return NormalizedStatus(recipient_id=recipient_id, payload=as_dict(raw))
