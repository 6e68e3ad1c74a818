"""Protocolos e contratos do core da aplicação."""

from .event_handler import EventHandlerProtocol
from .models import (
    NormalizedMessage,
    NormalizedStatus,
    ReplyButton,
    ReplyContent,
    TemplateReply,
)
from .outbound_client import OutboundClientProtocol

__all__ = [
    "EventHandlerProtocol",
    "NormalizedMessage",
    "NormalizedStatus",
    "OutboundClientProtocol",
    "ReplyButton",
    "ReplyContent",
    "TemplateReply",
]
