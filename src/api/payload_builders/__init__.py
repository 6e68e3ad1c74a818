"""Payload builders por canal: construção de payloads para a Graph API.

Estrutura:
- whatsapp/: WhatsApp Cloud API (texto, interactive, templates, read)
- instagram/: Instagram Messaging API (texto, mark_read)
"""

__all__: list[str] = []
