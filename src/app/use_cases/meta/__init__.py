"""Casos de uso dos canais Meta."""

from app.use_cases.meta.conversation import ConversationHandler

__all__ = ["ConversationHandler"]
