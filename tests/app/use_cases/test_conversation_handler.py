"""Testes do handler de conversa sobre clientes outbound fake."""

from __future__ import annotations

import logging

import pytest

from app.constants.meta import Platform
from app.protocols.models import NormalizedMessage, NormalizedStatus
from app.use_cases.meta import ConversationHandler
from tests.fakes.fake_outbound_client import FakeOutboundClient

TEXT_MESSAGE = NormalizedMessage(id="wamid.IN", type="text", text="hi", sender_id="5511")


@pytest.mark.asyncio
async def test_marks_read_then_replies() -> None:
    client = FakeOutboundClient(Platform.WHATSAPP)
    handler = ConversationHandler({Platform.WHATSAPP: client})

    await handler.handle_message(Platform.WHATSAPP, "PHONE_ID", TEXT_MESSAGE)

    assert client.actions == ["mark_as_read", "send_reply"]
    assert client.calls[0][1] == ("PHONE_ID", "wamid.IN", "5511")
    business_id, recipient_id, content = client.calls[1][1]
    assert (business_id, recipient_id) == ("PHONE_ID", "5511")
    assert content.buttons


@pytest.mark.asyncio
async def test_uses_injected_reply_resolver() -> None:
    from app.protocols.models import ReplyContent

    client = FakeOutboundClient(Platform.INSTAGRAM)
    handler = ConversationHandler(
        {Platform.INSTAGRAM: client},
        reply_resolver=lambda message, platform: ReplyContent(text=f"echo {message.text}"),
    )

    await handler.handle_message(Platform.INSTAGRAM, "12345", TEXT_MESSAGE)

    assert client.calls[1][1][2] == ReplyContent(text="echo hi")


@pytest.mark.asyncio
async def test_mark_as_read_failure_does_not_block_reply(
    caplog: pytest.LogCaptureFixture,
) -> None:
    client = FakeOutboundClient(Platform.WHATSAPP, fail_on={"mark_as_read"})
    handler = ConversationHandler({Platform.WHATSAPP: client})

    with caplog.at_level(logging.ERROR):
        await handler.handle_message(Platform.WHATSAPP, "PHONE_ID", TEXT_MESSAGE)

    assert client.actions == ["mark_as_read", "send_reply"]
    record = next(r for r in caplog.records if r.getMessage() == "outbound_call_failed")
    assert record.platform == "whatsapp"
    assert record.recipient_id == "5511"
    assert record.action == "mark_as_read"
    assert record.error == "mark_as_read failed"


@pytest.mark.asyncio
async def test_send_failure_is_logged_not_raised(caplog: pytest.LogCaptureFixture) -> None:
    client = FakeOutboundClient(Platform.WHATSAPP, fail_on={"send_reply"})
    handler = ConversationHandler({Platform.WHATSAPP: client})

    with caplog.at_level(logging.ERROR):
        await handler.handle_message(Platform.WHATSAPP, "PHONE_ID", TEXT_MESSAGE)

    assert any(r.getMessage() == "outbound_call_failed" for r in caplog.records)


@pytest.mark.asyncio
async def test_missing_platform_client_skips(caplog: pytest.LogCaptureFixture) -> None:
    handler = ConversationHandler({})

    with caplog.at_level(logging.WARNING):
        await handler.handle_message(Platform.INSTAGRAM, "12345", TEXT_MESSAGE)

    assert any(r.getMessage() == "outbound_client_unavailable" for r in caplog.records)


@pytest.mark.asyncio
async def test_missing_sender_skips_outbound() -> None:
    client = FakeOutboundClient(Platform.WHATSAPP)
    handler = ConversationHandler({Platform.WHATSAPP: client})
    message = NormalizedMessage(id="wamid.IN", type="text", text="hi")

    await handler.handle_message(Platform.WHATSAPP, "PHONE_ID", message)

    assert client.calls == []


@pytest.mark.asyncio
async def test_status_is_logged_without_outbound(caplog: pytest.LogCaptureFixture) -> None:
    client = FakeOutboundClient(Platform.WHATSAPP)
    handler = ConversationHandler({Platform.WHATSAPP: client})
    status = NormalizedStatus(recipient_id="PHONE_ID", payload={"status": "delivered"})

    with caplog.at_level(logging.INFO):
        await handler.handle_status(Platform.WHATSAPP, "PHONE_ID", status)

    assert client.calls == []
    record = next(r for r in caplog.records if r.getMessage() == "status_received")
    assert record.status == "delivered"
