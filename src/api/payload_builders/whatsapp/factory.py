"""Monta o payload WhatsApp completo a partir de um ReplyContent."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.whatsapp.base import MESSAGING_PRODUCT, build_base_payload
from api.payload_builders.whatsapp.interactive import InteractivePayloadBuilder
from api.payload_builders.whatsapp.template import TemplatePayloadBuilder
from api.payload_builders.whatsapp.text import TextPayloadBuilder

if TYPE_CHECKING:
    from app.protocols.models import ReplyContent

_TEXT_BUILDER = TextPayloadBuilder()
_INTERACTIVE_BUILDER = InteractivePayloadBuilder()
_TEMPLATE_BUILDER = TemplatePayloadBuilder()


def build_full_payload(
    recipient_phone: str,
    content: ReplyContent,
    template_builder: TemplatePayloadBuilder | None = None,
) -> dict[str, Any]:
    """Constrói payload completo para POST /{phone_number_id}/messages.

    Template tem prioridade; com botões vira interactive; senão texto.

    Raises:
        ValueError: Se o conteúdo não formar uma mensagem válida
    """
    payload = build_base_payload(recipient_phone)

    if content.template is not None:
        payload.update((template_builder or _TEMPLATE_BUILDER).build(content))
    elif content.buttons:
        payload.update(_INTERACTIVE_BUILDER.build(content))
    else:
        payload.update(_TEXT_BUILDER.build(content))
    return payload


def build_mark_as_read_payload(message_id: str) -> dict[str, Any]:
    """Payload que marca uma mensagem recebida como lida."""
    if not message_id:
        raise ValueError("message_id é obrigatório para marcar como lida")
    return {
        "messaging_product": MESSAGING_PRODUCT,
        "status": "read",
        "message_id": message_id,
    }
