"""Testes do normalizer de mensagens Meta."""

from __future__ import annotations

from api.normalizers.meta import normalize_message, normalize_status


class TestNormalizeMessage:
    def test_button_reply_id_becomes_type(self) -> None:
        raw = {
            "from": "5511999990000",
            "id": "wamid.BTN",
            "type": "interactive",
            "interactive": {
                "type": "button_reply",
                "button_reply": {"id": "BUY_NOW", "title": "Buy now"},
            },
        }

        message = normalize_message(raw)

        assert message.type == "BUY_NOW"
        assert message.id == "wamid.BTN"
        assert message.sender_id == "5511999990000"
        assert message.text is None

    def test_button_reply_wins_over_text(self) -> None:
        raw = {
            "type": "interactive",
            "interactive": {"button_reply": {"id": "OFFERS"}},
            "text": {"body": "ignored"},
        }

        assert normalize_message(raw).type == "OFFERS"

    def test_direct_text_body(self) -> None:
        message = normalize_message({"text": {"body": "hi"}})

        assert message.type == "text"
        assert message.text == "hi"
        assert message.is_text is True

    def test_direct_plain_string_text(self) -> None:
        message = normalize_message({"text": "hey"})

        assert message.type == "text"
        assert message.text == "hey"

    def test_nested_instagram_text(self) -> None:
        raw = {
            "sender": {"id": "IGSID_USER"},
            "recipient": {"id": "12345"},
            "message": {"mid": "mid.IG", "text": "hello"},
        }

        message = normalize_message(raw)

        assert message.type == "text"
        assert message.text == "hello"
        assert message.id == "mid.IG"
        assert message.sender_id == "IGSID_USER"

    def test_neither_shape_is_unknown(self) -> None:
        message = normalize_message({"id": "wamid.IMG", "type": "image", "image": {}})

        assert message.type == "unknown"
        assert message.is_unknown is True
        assert message.text is None

    def test_missing_sender_does_not_fail(self) -> None:
        message = normalize_message({"text": {"body": "hi"}})

        assert message.sender_id is None

    def test_from_preferred_over_sender(self) -> None:
        message = normalize_message({"from": "phone", "sender": {"id": "igsid"}, "text": "x"})

        assert message.sender_id == "phone"

    def test_non_dict_input_is_unknown(self) -> None:
        message = normalize_message(None)  # type: ignore[arg-type]

        assert message.type == "unknown"
        assert message.id is None


class TestNormalizeStatus:
    def test_payload_passed_through(self) -> None:
        raw = {"id": "wamid.X", "status": "delivered", "recipient_id": "5511"}

        status = normalize_status("PHONE_NUMBER_ID", raw)

        assert status.recipient_id == "PHONE_NUMBER_ID"
        assert status.payload == raw
        assert status.status == "delivered"

    def test_instagram_read_receipt_summary(self) -> None:
        status = normalize_status("12345", {"read": {"mid": "mid.IG"}})

        assert status.status == "read"

    def test_instagram_delivery_summary(self) -> None:
        status = normalize_status("12345", {"delivery": {"mids": ["mid.IG"]}})

        assert status.status == "delivered"
