"""Cliente da Graph API para envio outbound (WhatsApp e Instagram).

Uma instância por plataforma, cada uma com seu access token. Ambas
chamam POST /{business_id}/messages; o formato do corpo muda por
plataforma.

Sem retry: falhas sobem como HttpError e o chamador apenas loga.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.meta.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.meta.meta_errors import parse_meta_error
from api.connectors.meta.meta_logging import log_meta_error, log_success
from api.payload_builders.instagram import build_instagram_reply, build_mark_read_payload
from api.payload_builders.whatsapp import build_full_payload, build_mark_as_read_payload
from app.constants.meta import Platform

if TYPE_CHECKING:
    import httpx

    from api.payload_builders.whatsapp import TemplatePayloadBuilder
    from app.protocols.models import ReplyContent
    from config.settings import MetaSettings

logger: logging.Logger = logging.getLogger(__name__)


class MetaGraphClient(HttpClient):
    """Cliente outbound de uma plataforma Meta.

    Implementa OutboundClientProtocol.
    """

    def __init__(
        self,
        platform: Platform,
        access_token: str,
        settings: MetaSettings,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        template_builder: TemplatePayloadBuilder | None = None,
    ) -> None:
        super().__init__(
            config or HttpClientConfig(timeout_seconds=settings.request_timeout_seconds),
            transport=transport,
        )
        self.platform = platform
        self._access_token = access_token
        self._settings = settings
        self._template_builder = template_builder

    async def send_reply(
        self,
        business_id: str,
        recipient_id: str,
        content: ReplyContent,
    ) -> dict[str, Any]:
        """Envia uma resposta ao usuário.

        Raises:
            ValueError: Conteúdo inválido ou business_id ausente
            HttpError: Falha de rede ou erro da Graph API
        """
        if self.platform == Platform.WHATSAPP:
            payload = build_full_payload(recipient_id, content, self._template_builder)
        else:
            payload = build_instagram_reply(recipient_id, content)
        return await self._send(business_id, payload, action="send_reply")

    async def mark_as_read(
        self,
        business_id: str,
        message_id: str | None,
        recipient_id: str | None = None,
    ) -> dict[str, Any]:
        """Marca mensagem como lida.

        WhatsApp usa o message_id; Instagram marca a conversa com o
        recipient_id (IGSID do usuário).
        """
        if self.platform == Platform.WHATSAPP:
            payload = build_mark_as_read_payload(message_id or "")
        else:
            payload = build_mark_read_payload(recipient_id or "")
        return await self._send(business_id, payload, action="mark_as_read")

    async def _send(
        self,
        business_id: str,
        payload: dict[str, Any],
        *,
        action: str,
    ) -> dict[str, Any]:
        if not self._access_token or not self._access_token.strip():
            raise ValueError(
                f"access_token ausente para {self.platform.value}. "
                "Verifique as variáveis de ambiente."
            )

        endpoint = self._settings.get_messages_endpoint(business_id)
        logger.debug(
            "meta_api_call_started",
            extra={"platform": self.platform.value, "business_id": business_id, "action": action},
        )
        response = await self.post(
            endpoint,
            json=payload,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self._access_token}",
            },
        )
        return self._process_response(response, business_id, action)

    def _process_response(
        self,
        response: httpx.Response,
        business_id: str,
        action: str,
    ) -> dict[str, Any]:
        try:
            response_data = response.json()
        except json.JSONDecodeError as exc:
            logger.error(
                "meta_api_invalid_json",
                extra={"platform": self.platform.value, "status_code": response.status_code},
            )
            raise HttpError("Response JSON inválido", status_code=response.status_code) from exc

        meta_error = parse_meta_error(response_data, response.status_code)
        if meta_error is not None:
            log_meta_error(meta_error, self.platform.value, business_id)
            raise HttpError(
                f"Meta API error: {meta_error.error_message} ({meta_error.error_code})",
                status_code=response.status_code,
            )

        log_success(self.platform.value, business_id, action, response.status_code)
        return response_data if isinstance(response_data, dict) else {"data": response_data}


def create_meta_graph_client(
    platform: Platform,
    settings: MetaSettings | None = None,
) -> MetaGraphClient:
    """Factory com o access token da plataforma vindo das settings.

    Args:
        platform: Plataforma do cliente
        settings: MetaSettings opcional. Se None, carrega do ambiente.
    """
    # Import local para evitar dependência circular
    from config.settings import get_meta_settings

    meta = settings or get_meta_settings()
    access_token = (
        meta.whatsapp_access_token
        if platform == Platform.WHATSAPP
        else meta.instagram_access_token
    )
    return MetaGraphClient(platform=platform, access_token=access_token, settings=meta)
