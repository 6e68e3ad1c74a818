"""Normalizer Meta: WhatsApp Business e Instagram Messaging.

Responsabilidades:
- Identificar o tipo de envelope (campo `object`)
- Percorrer entry/changes/messaging conforme a plataforma
- Normalizar cada evento folha para NormalizedMessage/NormalizedStatus
"""

from .envelope import (
    IgnoredEvent,
    RoutedEvent,
    RoutingOutcome,
    adapt_change_to_messaging,
    parse_envelope_kind,
    resolve_business_id,
    route_webhook_payload,
)
from .normalizer import normalize_message, normalize_status

__all__ = [
    "IgnoredEvent",
    "RoutedEvent",
    "RoutingOutcome",
    "adapt_change_to_messaging",
    "normalize_message",
    "normalize_status",
    "parse_envelope_kind",
    "resolve_business_id",
    "route_webhook_payload",
]
