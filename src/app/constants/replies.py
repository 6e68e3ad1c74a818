"""Catálogo fixo de respostas da loja.

Texto livre recebe boas-vindas com o menu de botões. Cada botão tem sua
resposta: texto simples ou template aprovado na Meta.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.constants.meta import TemplateKind
from app.protocols.models import ReplyButton, TemplateReply

BUTTON_OFFERS = "OFFERS"
BUTTON_CATALOG = "CATALOG"
BUTTON_ORDER_STATUS = "ORDER_STATUS"
BUTTON_BUY_NOW = "BUY_NOW"

WELCOME_TEXT = (
    "Welcome to Jasper's Market! Fresh produce delivered to your door. "
    "How can we help you today?"
)

FALLBACK_TEXT = (
    "Sorry, we can only read text messages for now. "
    "Send us a message and we will show you the menu."
)

MENU_BUTTONS: tuple[ReplyButton, ...] = (
    ReplyButton(id=BUTTON_OFFERS, title="Today's offers"),
    ReplyButton(id=BUTTON_CATALOG, title="See catalog"),
    ReplyButton(id=BUTTON_ORDER_STATUS, title="Order status"),
)


@dataclass(frozen=True, slots=True)
class ButtonReplyConfig:
    """Resposta configurada para um id de botão.

    Attributes:
        text: Texto enviado (WhatsApp sem template e Instagram)
        template: Template preferido no WhatsApp (opcional)
        buttons: Botões que acompanham o texto (opcional)
    """

    text: str
    template: TemplateReply | None = None
    buttons: tuple[ReplyButton, ...] = ()


BUTTON_REPLIES: dict[str, ButtonReplyConfig] = {
    BUTTON_OFFERS: ButtonReplyConfig(
        text="Use code FRESH10 for 10% off your next order in the next 48 hours.",
        template=TemplateReply(
            kind=TemplateKind.LIMITED_TIME_OFFER,
            name="limited_time_offer_fresh_produce",
            image_links=("https://static.jaspersmarket.example/offers/produce.png",),
            offer_code="FRESH10",
        ),
    ),
    BUTTON_CATALOG: ButtonReplyConfig(
        text="Browse our catalog at https://jaspersmarket.example/catalog",
        template=TemplateReply(
            kind=TemplateKind.MEDIA_CARD_CAROUSEL,
            name="media_card_carousel_weekly_picks",
            image_links=(
                "https://static.jaspersmarket.example/catalog/strawberries.png",
                "https://static.jaspersmarket.example/catalog/avocados.png",
                "https://static.jaspersmarket.example/catalog/lettuce.png",
            ),
        ),
    ),
    BUTTON_ORDER_STATUS: ButtonReplyConfig(
        text="Your last order is on its way. Need anything else?",
        template=TemplateReply(
            kind=TemplateKind.UTILITY,
            name="order_shipped_update",
            image_links=("https://static.jaspersmarket.example/orders/truck.png",),
        ),
    ),
    BUTTON_BUY_NOW: ButtonReplyConfig(
        text="Great choice! Reply with the product name and we will reserve it for you.",
        buttons=(ReplyButton(id=BUTTON_CATALOG, title="See catalog"),),
    ),
}
