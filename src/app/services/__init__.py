"""Serviços de aplicação (sem IO direto)."""

from app.services.reply_catalog import resolve_reply

__all__ = ["resolve_reply"]
