"""Builder para mensagens interativas com botões de resposta."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.constants.meta import MAX_BUTTON_TITLE_LENGTH, MAX_REPLY_BUTTONS

if TYPE_CHECKING:
    from app.protocols.models import ReplyContent


class InteractivePayloadBuilder:
    """Mensagem `interactive` do tipo `button` (até 3 botões de resposta).

    O id de cada botão volta no webhook como interactive.button_reply.id
    quando o usuário toca nele.
    """

    def build(self, content: ReplyContent) -> dict[str, Any]:
        if not content.text:
            raise ValueError("text é obrigatório para mensagem interativa")
        if not content.buttons:
            raise ValueError("mensagem interativa requer ao menos um botão")
        if len(content.buttons) > MAX_REPLY_BUTTONS:
            raise ValueError(f"máximo de {MAX_REPLY_BUTTONS} botões por mensagem")

        return {
            "type": "interactive",
            "interactive": {
                "type": "button",
                "body": {"text": content.text},
                "action": {
                    "buttons": [
                        {
                            "type": "reply",
                            "reply": {
                                "id": button.id,
                                "title": button.title[:MAX_BUTTON_TITLE_LENGTH],
                            },
                        }
                        for button in content.buttons
                    ],
                },
            },
        }
