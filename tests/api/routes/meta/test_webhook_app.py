"""Testes ponta a ponta do webhook via TestClient (processamento inline)."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.routes import create_api_router
from api.routes.meta import webhook
from tests.fakes.fake_outbound_client import RecordingEventHandler


@pytest.fixture
def handler() -> RecordingEventHandler:
    return RecordingEventHandler()


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch, handler: RecordingEventHandler) -> TestClient:
    settings = SimpleNamespace(
        verify_token="token",
        signature_secrets=("wa-secret", "ig-secret"),
        require_signature=True,
        webhook_processing_mode="inline",
    )
    monkeypatch.setattr(webhook, "get_meta_settings", lambda: settings)

    app = FastAPI()
    app.include_router(create_api_router())
    app.state.conversation_handler = handler
    return TestClient(app)


def _post(client: TestClient, payload: dict, headers: dict) -> object:
    return client.post("/webhook", content=json.dumps(payload).encode(), headers=headers)


def test_whatsapp_message_reaches_handler(
    client: TestClient,
    handler: RecordingEventHandler,
    sign_body,
    whatsapp_text_payload: dict,
) -> None:
    body = json.dumps(whatsapp_text_payload).encode()

    response = client.post(
        "/webhook",
        content=body,
        headers={"x-hub-signature-256": sign_body(body, "wa-secret")},
    )

    assert response.status_code == 200
    assert response.text == "EVENT_RECEIVED"
    _, business_id, message = handler.messages[0]
    assert business_id == "PHONE_NUMBER_ID"
    assert message.text == "hi"


def test_instagram_signed_with_secondary_secret(
    client: TestClient,
    handler: RecordingEventHandler,
    sign_body,
    instagram_messaging_payload: dict,
) -> None:
    body = json.dumps(instagram_messaging_payload).encode()

    response = client.post(
        "/webhook",
        content=body,
        headers={"x-hub-signature-256": sign_body(body, "ig-secret")},
    )

    assert response.status_code == 200
    assert handler.messages[0][1] == "98765"


def test_unrecognized_object_still_acknowledged(
    client: TestClient,
    handler: RecordingEventHandler,
    sign_body,
) -> None:
    body = b'{"object": "page", "entry": [{"id": "1"}]}'

    response = client.post(
        "/webhook",
        content=body,
        headers={"x-hub-signature-256": sign_body(body, "wa-secret")},
    )

    assert response.status_code == 200
    assert response.text == "EVENT_RECEIVED"
    assert handler.messages == []


def test_json_array_body_acknowledged(
    client: TestClient,
    handler: RecordingEventHandler,
    sign_body,
) -> None:
    body = b'[{"object": "instagram"}]'

    response = client.post(
        "/webhook",
        content=body,
        headers={"x-hub-signature-256": sign_body(body, "wa-secret")},
    )

    assert response.status_code == 200
    assert response.text == "EVENT_RECEIVED"
    assert handler.messages == []


def test_bad_signature_rejected_before_dispatch(
    client: TestClient,
    handler: RecordingEventHandler,
    whatsapp_text_payload: dict,
) -> None:
    response = _post(client, whatsapp_text_payload, {"x-hub-signature-256": "sha256=00"})

    assert response.status_code == 401
    assert handler.messages == []


def test_non_ascii_signature_header_rejected(
    client: TestClient,
    handler: RecordingEventHandler,
    whatsapp_text_payload: dict,
) -> None:
    headers = {"x-hub-signature-256": "sha256=é".encode("latin-1")}

    response = _post(client, whatsapp_text_payload, headers)

    assert response.status_code == 401
    assert response.text == "Unauthorized"
    assert handler.messages == []


def test_handshake_round_trip(client: TestClient) -> None:
    ok = client.get(
        "/webhook",
        params={"hub.mode": "subscribe", "hub.verify_token": "token", "hub.challenge": "1158201444"},
    )
    denied = client.get(
        "/webhook",
        params={"hub.mode": "subscribe", "hub.verify_token": "nope", "hub.challenge": "1158201444"},
    )

    assert (ok.status_code, ok.text) == (200, "1158201444")
    assert denied.status_code == 403
    assert "1158201444" not in denied.text
