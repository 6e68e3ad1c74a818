"""Configuração do pytest para a ponte de webhooks Meta."""

import hashlib
import hmac
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


def _sign_body(body: bytes, secret: str) -> str:
    digest = hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()
    return f"sha256={digest}"


@pytest.fixture
def sign_body() -> Callable[[bytes, str], str]:
    """Gera o header X-Hub-Signature-256 para um corpo e secret."""
    return _sign_body


@pytest.fixture
def whatsapp_text_payload() -> dict:
    return {
        "object": "whatsapp_business_account",
        "entry": [
            {
                "id": "WABA_ID",
                "changes": [
                    {
                        "field": "messages",
                        "value": {
                            "messaging_product": "whatsapp",
                            "metadata": {
                                "display_phone_number": "15550001111",
                                "phone_number_id": "PHONE_NUMBER_ID",
                            },
                            "messages": [
                                {
                                    "from": "5511999990000",
                                    "id": "wamid.TEXT",
                                    "timestamp": "1700000000",
                                    "type": "text",
                                    "text": {"body": "hi"},
                                }
                            ],
                        },
                    }
                ],
            }
        ],
    }


@pytest.fixture
def instagram_messaging_payload() -> dict:
    return {
        "object": "instagram",
        "entry": [
            {
                "id": "98765",
                "time": 1700000000,
                "messaging": [
                    {
                        "sender": {"id": "IGSID_USER"},
                        "recipient": {"id": "12345"},
                        "timestamp": 1700000000,
                        "message": {"mid": "mid.IG", "text": "hello"},
                    }
                ],
            }
        ],
    }
