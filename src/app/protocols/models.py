"""Modelos canônicos compartilhados entre api/ e app/.

Todos imutáveis: construídos uma vez por evento e descartados ao fim
do tratamento.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from app.constants.meta import MESSAGE_TYPE_TEXT, MESSAGE_TYPE_UNKNOWN, TemplateKind

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class NormalizedMessage:
    """Mensagem inbound independente de plataforma.

    Attributes:
        id: ID da mensagem na plataforma (wamid / mid)
        type: "text", "unknown" ou o id do botão de resposta interativa
        text: Conteúdo textual quando type == "text"
        sender_id: Telefone (WhatsApp) ou IGSID (Instagram); None se ausente
    """

    id: str | None
    type: str
    text: str | None = None
    sender_id: str | None = None

    @property
    def is_text(self) -> bool:
        return self.type == MESSAGE_TYPE_TEXT

    @property
    def is_unknown(self) -> bool:
        return self.type == MESSAGE_TYPE_UNKNOWN


@dataclass(frozen=True, slots=True)
class NormalizedStatus:
    """Recibo de entrega/leitura, repassado sem modificação.

    Attributes:
        recipient_id: phone_number_id (WhatsApp) ou page/business id (Instagram)
        payload: Evento de status original
    """

    recipient_id: str | None
    payload: Mapping[str, Any]

    @property
    def status(self) -> str | None:
        """Status resumido para logs (sent/delivered/read/failed)."""
        value = self.payload.get("status")
        if isinstance(value, str):
            return value
        if "read" in self.payload:
            return "read"
        if "delivery" in self.payload:
            return "delivered"
        return None


@dataclass(frozen=True, slots=True)
class ReplyButton:
    """Botão de resposta rápida (id volta como type da próxima mensagem)."""

    id: str
    title: str


@dataclass(frozen=True, slots=True)
class TemplateReply:
    """Template aprovado a enviar como resposta.

    Attributes:
        kind: Formato do template
        name: Nome do template aprovado na Meta
        locale: Código de idioma (ex: en_US)
        image_links: Imagens do header (uma) ou dos cards do carrossel
        offer_code: Cupom copiável (apenas limited_time_offer)
    """

    kind: TemplateKind
    name: str
    locale: str = "en_US"
    image_links: tuple[str, ...] = ()
    offer_code: str | None = None


@dataclass(frozen=True, slots=True)
class ReplyContent:
    """Conteúdo de resposta decidido por um handler.

    Template tem prioridade sobre texto; botões só se aplicam a texto.
    """

    text: str | None = None
    buttons: tuple[ReplyButton, ...] = field(default_factory=tuple)
    template: TemplateReply | None = None
