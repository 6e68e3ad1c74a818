"""Handshake GET exigido pela Meta antes de entregar eventos."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

HUB_MODE_SUBSCRIBE = "subscribe"


class WebhookChallengeError(ValueError):
    """Handshake recusado (token ausente, divergente ou modo inválido)."""


@dataclass(frozen=True)
class HubChallenge:
    """Query params do handshake (hub.mode, hub.verify_token, hub.challenge)."""

    mode: str | None
    verify_token: str | None
    challenge: str | None

    @classmethod
    def from_query(cls, query: Mapping[str, str]) -> HubChallenge:
        return cls(
            mode=query.get("hub.mode"),
            verify_token=query.get("hub.verify_token"),
            challenge=query.get("hub.challenge"),
        )


def verify_webhook_challenge(hub: HubChallenge, expected_token: str | None) -> str:
    """Valida o handshake e retorna o challenge a ecoar.

    Raises:
        WebhookChallengeError: "missing_verify_token" se o servidor não tem
            token configurado; "verification_failed" se modo ou token não
            conferem.
    """
    if not expected_token:
        raise WebhookChallengeError("missing_verify_token")

    if hub.mode != HUB_MODE_SUBSCRIBE or hub.verify_token != expected_token:
        raise WebhookChallengeError("verification_failed")

    return hub.challenge or ""
