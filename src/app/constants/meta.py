"""Enums e constantes de domínio dos canais Meta."""

from __future__ import annotations

from enum import StrEnum


class Platform(StrEnum):
    """Plataforma de origem/destino de um evento."""

    WHATSAPP = "whatsapp"
    INSTAGRAM = "instagram"


class EnvelopeKind(StrEnum):
    """Valores suportados do campo `object` no topo do webhook."""

    WHATSAPP_BUSINESS_ACCOUNT = "whatsapp_business_account"
    INSTAGRAM = "instagram"


class TemplateKind(StrEnum):
    """Formatos de template outbound suportados."""

    UTILITY = "utility"
    LIMITED_TIME_OFFER = "limited_time_offer"
    MEDIA_CARD_CAROUSEL = "media_card_carousel"


ENVELOPE_PLATFORMS: dict[EnvelopeKind, Platform] = {
    EnvelopeKind.WHATSAPP_BUSINESS_ACCOUNT: Platform.WHATSAPP,
    EnvelopeKind.INSTAGRAM: Platform.INSTAGRAM,
}

# Tipos normalizados fixos; respostas de botão usam o próprio id como tipo
MESSAGE_TYPE_TEXT = "text"
MESSAGE_TYPE_UNKNOWN = "unknown"

# entry.id "0" não identifica a conta; usar recipient.id do evento
INSTAGRAM_SENTINEL_ENTRY_ID = "0"

SIGNATURE_HEADER = "x-hub-signature-256"
SIGNATURE_ALGORITHM = "sha256"

# Limite da API para botões de resposta em mensagens interativas
MAX_REPLY_BUTTONS = 3
MAX_BUTTON_TITLE_LENGTH = 20

# Validade do template de oferta por tempo limitado
LIMITED_TIME_OFFER_HOURS = 48
