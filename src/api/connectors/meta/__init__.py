"""Connector Meta: webhook inbound e Graph API outbound.

Compartilhado por WhatsApp e Instagram: ambos usam o mesmo formato de
assinatura, o mesmo handshake e o mesmo endpoint /{id}/messages.
"""

from api.connectors.meta.graph_client import MetaGraphClient, create_meta_graph_client
from api.connectors.meta.http_base import HttpClientConfig, HttpError
from api.connectors.meta.signature import SignatureResult, verify_meta_signature

__all__ = [
    "HttpClientConfig",
    "HttpError",
    "MetaGraphClient",
    "SignatureResult",
    "create_meta_graph_client",
    "verify_meta_signature",
]
