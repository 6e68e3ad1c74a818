"""Coordenação do processamento de webhooks Meta."""

from app.coordinators.meta.dispatcher import DispatchResult, dispatch_webhook_payload

__all__ = ["DispatchResult", "dispatch_webhook_payload"]
