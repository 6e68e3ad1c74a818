"""Settings dos canais Meta (WhatsApp Cloud API e Instagram Messaging).

Os dois canais compartilham o mesmo endpoint de webhook, o mesmo
verify token e a mesma versão da Graph API. Cada canal tem seu próprio
app secret e access token.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from config.settings.base import parse_environment

# Constantes do Graph API
GRAPH_API_VERSION: str = "v24.0"
GRAPH_API_BASE_URL: str = "https://graph.facebook.com"


@dataclass(frozen=True)
class MetaSettings:
    """Configurações dos canais Meta.

    Attributes:
        verify_token: Token para verificação de webhook (hub.verify_token)
        app_secret: Secret principal para validação HMAC de payloads
        ig_app_secret: Secret do app Instagram (segunda chave candidata)
        whatsapp_access_token: Token de acesso à Graph API para WhatsApp
        instagram_access_token: Token de acesso à Graph API para Instagram
        api_version: Versão da Graph API (ex: v24.0)
        api_base_url: URL base da Graph API
        request_timeout_seconds: Timeout para requisições HTTP
        require_signature: Rejeita POST sem header de assinatura
        webhook_processing_mode: "async" responde antes do processamento;
            "inline" processa antes de responder
    """

    # Credenciais
    verify_token: str = ""
    app_secret: str = ""
    ig_app_secret: str = ""
    whatsapp_access_token: str = ""
    instagram_access_token: str = ""

    # API
    api_version: str = GRAPH_API_VERSION
    api_base_url: str = GRAPH_API_BASE_URL
    request_timeout_seconds: float = 30.0

    # Webhook
    require_signature: bool = True
    webhook_processing_mode: str = "async"

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url}/{self.api_version}"

    @property
    def signature_secrets(self) -> tuple[str, ...]:
        """Secrets candidatos para HMAC, sem vazios nem repetidos."""
        secrets: list[str] = []
        for secret in (self.app_secret, self.ig_app_secret):
            if secret and secret not in secrets:
                secrets.append(secret)
        return tuple(secrets)

    def get_messages_endpoint(self, business_id: str) -> str:
        """Retorna URL para envio de mensagens.

        Args:
            business_id: phone_number_id (WhatsApp) ou page/business id (Instagram).

        Returns:
            URL completa no formato: https://graph.facebook.com/v24.0/{id}/messages

        Raises:
            ValueError: Se business_id não informado.
        """
        if not business_id:
            raise ValueError("business_id é obrigatório")
        return f"{self.api_endpoint}/{business_id}/messages"

    def validate(self) -> list[str]:
        """Valida configurações mínimas dos canais Meta.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.verify_token:
            errors.append("META_VERIFY_TOKEN não configurado")

        if not self.app_secret:
            errors.append("META_APP_SECRET não configurado")

        if not self.whatsapp_access_token and not self.instagram_access_token:
            errors.append(
                "WHATSAPP_ACCESS_TOKEN ou INSTAGRAM_ACCESS_TOKEN deve ser configurado"
            )

        if self.request_timeout_seconds <= 0:
            errors.append("META_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.webhook_processing_mode not in ("async", "inline"):
            errors.append("META_WEBHOOK_PROCESSING_MODE deve ser 'async' ou 'inline'")

        return errors


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


def _load_from_env() -> MetaSettings:
    """Carrega MetaSettings a partir de variáveis de ambiente."""
    environment = parse_environment(os.getenv("ENVIRONMENT", "development"))
    default_require_signature = "false" if environment == "development" else "true"
    return MetaSettings(
        verify_token=os.getenv("META_VERIFY_TOKEN", ""),
        app_secret=os.getenv("META_APP_SECRET", ""),
        ig_app_secret=os.getenv("META_IG_APP_SECRET", ""),
        whatsapp_access_token=os.getenv("WHATSAPP_ACCESS_TOKEN", ""),
        instagram_access_token=os.getenv("INSTAGRAM_ACCESS_TOKEN", ""),
        api_version=os.getenv("META_API_VERSION", GRAPH_API_VERSION),
        api_base_url=os.getenv("META_API_BASE_URL", GRAPH_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("META_REQUEST_TIMEOUT_SECONDS", "30")),
        require_signature=_parse_bool(
            os.getenv("META_REQUIRE_SIGNATURE", default_require_signature)
        ),
        webhook_processing_mode=os.getenv("META_WEBHOOK_PROCESSING_MODE", "async").lower(),
    )


@lru_cache(maxsize=1)
def get_meta_settings() -> MetaSettings:
    """Retorna instância cacheada de MetaSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
