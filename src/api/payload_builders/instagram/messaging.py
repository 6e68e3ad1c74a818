"""Payloads da Instagram Messaging API (POST /{page_id}/messages)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols.models import ReplyContent

logger = logging.getLogger(__name__)


def build_text_message(recipient_id: str, text: str, tag: str | None = None) -> dict[str, Any]:
    """Mensagem de texto para um IGSID.

    Args:
        recipient_id: IGSID do destinatário
        text: Conteúdo
        tag: Message tag (ex: HUMAN_AGENT) para envio fora da janela de 24h
    """
    payload: dict[str, Any] = {
        "recipient": {"id": recipient_id},
        "message": {"text": text},
    }
    if tag:
        payload["messaging_type"] = "MESSAGE_TAG"
        payload["tag"] = tag
    return payload


def build_mark_read_payload(recipient_id: str) -> dict[str, Any]:
    """Sender action que marca a conversa com o usuário como lida."""
    if not recipient_id:
        raise ValueError("recipient_id é obrigatório para mark_read")
    return {
        "recipient": {"id": recipient_id},
        "sender_action": "mark_read",
    }


def build_instagram_reply(recipient_id: str, content: ReplyContent) -> dict[str, Any]:
    """Converte um ReplyContent em mensagem Instagram.

    Instagram não recebe templates nem botões de resposta deste serviço;
    apenas o texto é enviado.

    Raises:
        ValueError: Se não houver texto
    """
    if not content.text:
        raise ValueError("Instagram suporta apenas respostas de texto")
    if content.buttons or content.template is not None:
        logger.debug("instagram_reply_downgraded_to_text")
    return build_text_message(recipient_id, content.text)
