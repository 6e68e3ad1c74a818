"""Builder para mensagens de texto."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols.models import ReplyContent


class TextPayloadBuilder:
    """Builder para mensagens de texto simples."""

    def build(self, content: ReplyContent) -> dict[str, Any]:
        if not content.text:
            raise ValueError("text é obrigatório para mensagem de texto")
        return {
            "type": "text",
            "text": {
                "preview_url": False,
                "body": content.text,
            },
        }
