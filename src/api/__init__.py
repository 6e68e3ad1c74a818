"""API: camada de borda dos canais Meta.

Responsabilidades:
- Receber webhooks do WhatsApp e do Instagram
- Validar assinaturas e payloads
- Normalizar eventos para modelos internos
- Construir payloads para a Graph API

Subpastas:
- connectors/: assinatura, handshake e cliente HTTP da Graph API
- normalizers/: envelopes Meta → NormalizedMessage/NormalizedStatus
- payload_builders/: corpos de envio por plataforma
- routes/: endpoints HTTP (webhook, health)

NÃO PODE conter: escolha de resposta nem wiring de dependências.
"""
