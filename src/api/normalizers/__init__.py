"""Normalizers: conversão de envelopes de webhook para modelos internos.

Estrutura:
- meta/: WhatsApp Business (whatsapp_business_account) e Instagram
"""

from .meta import IgnoredEvent, RoutedEvent, normalize_message, route_webhook_payload

__all__ = [
    "IgnoredEvent",
    "RoutedEvent",
    "normalize_message",
    "route_webhook_payload",
]
