"""Rotas HTTP da API.

- routes/meta/: webhook Meta (GET handshake, POST eventos)
- routes/health/: liveness e informações do serviço
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
