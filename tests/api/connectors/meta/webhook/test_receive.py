"""Testes do parse do POST do webhook."""

from __future__ import annotations

import json

import pytest

from api.connectors.meta.webhook import (
    InvalidJsonError,
    InvalidSignatureError,
    parse_webhook_request,
)


def test_valid_signature_returns_payload(sign_body) -> None:
    body = json.dumps({"object": "instagram", "entry": []}).encode()
    headers = {"x-hub-signature-256": sign_body(body, "secret")}

    payload, result = parse_webhook_request(body, headers, ("secret",))

    assert payload == {"object": "instagram", "entry": []}
    assert result.valid is True


def test_signature_checked_before_json() -> None:
    with pytest.raises(InvalidSignatureError, match="signature_mismatch"):
        parse_webhook_request(
            b"not json",
            {"x-hub-signature-256": "sha256=" + "0" * 64},
            ("secret",),
        )


def test_invalid_json_raises(sign_body) -> None:
    body = b"{not json"
    headers = {"x-hub-signature-256": sign_body(body, "secret")}

    with pytest.raises(InvalidJsonError, match="invalid_json"):
        parse_webhook_request(body, headers, ("secret",))


def test_non_object_json_is_returned_as_is() -> None:
    payload, result = parse_webhook_request(b"[1, 2]", {}, ("secret",), require_signature=False)

    assert payload == [1, 2]
    assert result.skipped is True


def test_missing_header_allowed_when_not_required() -> None:
    payload, result = parse_webhook_request(
        b'{"object": "page"}', {}, ("secret",), require_signature=False
    )

    assert payload == {"object": "page"}
    assert result.skipped is True


def test_missing_header_rejected_when_required() -> None:
    with pytest.raises(InvalidSignatureError, match="missing_signature_header"):
        parse_webhook_request(b"{}", {}, ("secret",), require_signature=True)
