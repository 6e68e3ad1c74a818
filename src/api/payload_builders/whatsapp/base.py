"""Contrato e campos comuns dos payloads WhatsApp."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.protocols.models import ReplyContent

MESSAGING_PRODUCT = "whatsapp"


class PayloadBuilder(Protocol):
    """Builder de um tipo de mensagem (retorna só o bloco específico)."""

    def build(self, content: ReplyContent) -> dict[str, Any]: ...


def build_base_payload(recipient_phone: str) -> dict[str, Any]:
    """Campos comuns a toda mensagem enviada pela Cloud API."""
    return {
        "messaging_product": MESSAGING_PRODUCT,
        "recipient_type": "individual",
        "to": recipient_phone,
    }
