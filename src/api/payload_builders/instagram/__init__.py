"""Builders de payload para a Instagram Messaging API."""

from api.payload_builders.instagram.messaging import (
    build_instagram_reply,
    build_mark_read_payload,
    build_text_message,
)

__all__ = [
    "build_instagram_reply",
    "build_mark_read_payload",
    "build_text_message",
]
