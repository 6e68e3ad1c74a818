"""Builder para mensagens de template.

Formatos suportados:
- utility: header com imagem
- limited_time_offer: header com imagem, expiração e botão copy_code
- media_card_carousel: um card com imagem por link
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

from app.constants.meta import LIMITED_TIME_OFFER_HOURS, TemplateKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols.models import ReplyContent, TemplateReply


def _image_header(image_link: str) -> dict[str, Any]:
    return {
        "type": "header",
        "parameters": [{"type": "image", "image": {"link": image_link}}],
    }


class TemplatePayloadBuilder:
    """Builder para mensagens de template.

    Args:
        clock: Fonte de tempo para a expiração de ofertas (injetável em testes)
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or (lambda: datetime.now(UTC))

    def build(self, content: ReplyContent) -> dict[str, Any]:
        template = content.template
        if template is None:
            raise ValueError("template é obrigatório")

        components = self._build_components(template)
        template_obj: dict[str, Any] = {
            "name": template.name,
            "language": {"code": template.locale},
        }
        if components:
            template_obj["components"] = components
        return {"type": "template", "template": template_obj}

    def _build_components(self, template: TemplateReply) -> list[dict[str, Any]]:
        if template.kind == TemplateKind.UTILITY:
            return [_image_header(link) for link in template.image_links[:1]]

        if template.kind == TemplateKind.LIMITED_TIME_OFFER:
            return self._limited_time_offer_components(template)

        if template.kind == TemplateKind.MEDIA_CARD_CAROUSEL:
            if not template.image_links:
                raise ValueError("carrossel requer ao menos uma imagem")
            return [
                {
                    "type": "carousel",
                    "cards": [
                        {"card_index": index, "components": [_image_header(link)]}
                        for index, link in enumerate(template.image_links)
                    ],
                }
            ]

        raise ValueError(f"Tipo de template não suportado: {template.kind}")

    def _limited_time_offer_components(self, template: TemplateReply) -> list[dict[str, Any]]:
        if not template.offer_code:
            raise ValueError("offer_code é obrigatório para limited_time_offer")

        expires_at = self._clock() + timedelta(hours=LIMITED_TIME_OFFER_HOURS)
        components = [_image_header(link) for link in template.image_links[:1]]
        components.append(
            {
                "type": "limited_time_offer",
                "parameters": [
                    {
                        "type": "limited_time_offer",
                        "limited_time_offer": {
                            "expiration_time_ms": int(expires_at.timestamp() * 1000),
                        },
                    }
                ],
            }
        )
        components.append(
            {
                "type": "button",
                "sub_type": "copy_code",
                "index": 0,
                "parameters": [{"type": "coupon_code", "coupon_code": template.offer_code}],
            }
        )
        return components
