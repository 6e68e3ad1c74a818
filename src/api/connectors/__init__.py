"""Connectors: adapters de borda para a Graph API da Meta.

Estrutura:
- meta/: assinatura HMAC, handshake do webhook e cliente outbound
  compartilhado por WhatsApp e Instagram
"""

__all__: list[str] = []
