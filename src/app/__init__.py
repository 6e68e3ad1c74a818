"""App: orquestração do processamento dos webhooks Meta.

Subpastas:
- bootstrap/: composition root (logging, validação, clientes outbound)
- coordinators/: dispatch de eventos normalizados para o handler
- use_cases/: handler de conversa (marca como lida e responde)
- services/: catálogo de respostas
- protocols/: contratos e modelos canônicos
- observability/: correlation_id por requisição
- constants/: plataformas, limites da API e textos fixos

Padrão: app executa; api adapta; config configura.
"""
