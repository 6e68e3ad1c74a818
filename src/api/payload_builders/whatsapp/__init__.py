"""Builders de payload para a WhatsApp Cloud API."""

from api.payload_builders.whatsapp.base import PayloadBuilder, build_base_payload
from api.payload_builders.whatsapp.factory import (
    build_full_payload,
    build_mark_as_read_payload,
)
from api.payload_builders.whatsapp.interactive import InteractivePayloadBuilder
from api.payload_builders.whatsapp.template import TemplatePayloadBuilder
from api.payload_builders.whatsapp.text import TextPayloadBuilder

__all__ = [
    "InteractivePayloadBuilder",
    "PayloadBuilder",
    "TemplatePayloadBuilder",
    "TextPayloadBuilder",
    "build_base_payload",
    "build_full_payload",
    "build_mark_as_read_payload",
]
