"""Helpers de extração de campos de eventos Meta.

Cada helper tolera blocos ausentes ou com tipo inesperado e devolve None
em vez de falhar.
"""

from __future__ import annotations

from typing import Any


def as_dict(value: Any) -> dict[str, Any]:
    """Retorna o valor se for dict, senão dict vazio."""
    return value if isinstance(value, dict) else {}


def as_list(value: Any) -> list[Any] | None:
    """Retorna o valor se for list, None se ausente ou malformado."""
    return value if isinstance(value, list) else None


def extract_button_reply_id(raw: dict[str, Any]) -> str | None:
    """Extrai o id do botão em respostas interativas do WhatsApp."""
    interactive_block = raw.get("interactive")
    if not isinstance(interactive_block, dict):
        return None
    button_reply = interactive_block.get("button_reply")
    if not isinstance(button_reply, dict):
        return None
    reply_id = button_reply.get("id")
    return reply_id if isinstance(reply_id, str) and reply_id else None


def extract_direct_text(raw: dict[str, Any]) -> tuple[bool, str | None]:
    """Extrai `text.body` (WhatsApp) ou `text` quando já é string.

    Returns:
        (campo presente, conteúdo)
    """
    text_block = raw.get("text")
    if isinstance(text_block, dict):
        body = text_block.get("body")
        return True, body if isinstance(body, str) else None
    if isinstance(text_block, str) and text_block:
        return True, text_block
    return False, None


def extract_nested_text(raw: dict[str, Any]) -> str | None:
    """Extrai `message.text` (formato Instagram)."""
    text = as_dict(raw.get("message")).get("text")
    return text if isinstance(text, str) and text else None


def extract_message_id(raw: dict[str, Any]) -> str | None:
    """ID da mensagem: `id` (WhatsApp) ou `message.mid` (Instagram)."""
    message_id = raw.get("id") or as_dict(raw.get("message")).get("mid")
    return str(message_id) if message_id else None


def extract_sender_id(raw: dict[str, Any]) -> str | None:
    """Remetente: `from` (telefone) ou `sender.id`; None se ausente."""
    sender = raw.get("from") or as_dict(raw.get("sender")).get("id")
    return str(sender) if sender else None
