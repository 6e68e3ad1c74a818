"""Testes dos payloads da Instagram Messaging API."""

from __future__ import annotations

import pytest

from api.payload_builders.instagram import (
    build_instagram_reply,
    build_mark_read_payload,
    build_text_message,
)
from app.protocols.models import ReplyButton, ReplyContent


def test_text_message() -> None:
    assert build_text_message("IGSID", "hi") == {
        "recipient": {"id": "IGSID"},
        "message": {"text": "hi"},
    }


def test_text_message_with_tag() -> None:
    payload = build_text_message("IGSID", "hi", tag="HUMAN_AGENT")

    assert payload["messaging_type"] == "MESSAGE_TAG"
    assert payload["tag"] == "HUMAN_AGENT"


def test_mark_read_payload() -> None:
    assert build_mark_read_payload("IGSID") == {
        "recipient": {"id": "IGSID"},
        "sender_action": "mark_read",
    }


def test_reply_drops_buttons() -> None:
    content = ReplyContent(text="Menu", buttons=(ReplyButton("OFFERS", "Offers"),))

    assert build_instagram_reply("IGSID", content) == build_text_message("IGSID", "Menu")


def test_reply_without_text_rejected() -> None:
    with pytest.raises(ValueError):
        build_instagram_reply("IGSID", ReplyContent())
