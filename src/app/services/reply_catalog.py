"""Escolha determinística da resposta para uma mensagem normalizada."""

from __future__ import annotations

import logging

from app.constants.meta import Platform
from app.constants.replies import (
    BUTTON_REPLIES,
    FALLBACK_TEXT,
    MENU_BUTTONS,
    WELCOME_TEXT,
)
from app.protocols.models import NormalizedMessage, ReplyContent
from config.logging import log_fallback

logger = logging.getLogger(__name__)


def resolve_reply(message: NormalizedMessage, platform: Platform) -> ReplyContent:
    """Retorna a resposta para a mensagem recebida.

    - id de botão conhecido: resposta do catálogo (template só no WhatsApp)
    - texto: boas-vindas com menu (botões só no WhatsApp)
    - qualquer outro caso: texto de fallback
    """
    config = BUTTON_REPLIES.get(message.type)
    if config is not None:
        if platform == Platform.WHATSAPP and config.template is not None:
            return ReplyContent(text=config.text, template=config.template)
        buttons = config.buttons if platform == Platform.WHATSAPP else ()
        return ReplyContent(text=config.text, buttons=buttons)

    if message.is_text:
        buttons = MENU_BUTTONS if platform == Platform.WHATSAPP else ()
        return ReplyContent(text=WELCOME_TEXT, buttons=buttons)

    log_fallback(logger, "reply_catalog", reason=f"unhandled_type:{platform.value}")
    return ReplyContent(text=FALLBACK_TEXT)
