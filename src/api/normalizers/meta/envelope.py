"""Roteamento estrutural dos envelopes de webhook Meta.

Cada `object` suportado tem uma função pura própria que percorre os
arrays aninhados e devolve eventos já normalizados:

- whatsapp_business_account: entry[] -> changes[] -> value
  (value.statuses[] e value.messages[]; phone_number_id vem de value.metadata)
- instagram: entry[] -> messaging[] ou entry[] -> changes[]
  (changes com field == "messages" são adaptados ao formato messaging)

Formatos não suportados ou malformados viram IgnoredEvent; nada aqui
levanta exceção.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.constants.meta import (
    ENVELOPE_PLATFORMS,
    INSTAGRAM_SENTINEL_ENTRY_ID,
    EnvelopeKind,
    Platform,
)
from app.protocols.models import NormalizedMessage, NormalizedStatus

from ._extraction_helpers import as_dict, as_list
from .normalizer import normalize_message, normalize_status

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True, slots=True)
class RoutedEvent:
    """Evento folha pronto para o handler da plataforma."""

    platform: Platform
    business_id: str | None
    event: NormalizedMessage | NormalizedStatus

    @property
    def is_message(self) -> bool:
        return isinstance(self.event, NormalizedMessage)


@dataclass(frozen=True, slots=True)
class IgnoredEvent:
    """Formato descartado de propósito (não é erro)."""

    reason: str
    kind: str | None = None


RoutingOutcome = RoutedEvent | IgnoredEvent


def parse_envelope_kind(value: Any) -> EnvelopeKind | None:
    """Converte o campo `object` em EnvelopeKind (None se não suportado)."""
    if not isinstance(value, str):
        return None
    try:
        return EnvelopeKind(value)
    except ValueError:
        return None


def resolve_business_id(entry_id: Any, event: dict[str, Any]) -> str | None:
    """Resolve o page/business id de um evento Instagram.

    Usa entry.id, exceto quando ausente ou igual ao sentinela "0";
    nesse caso usa recipient.id do próprio evento.
    """
    if entry_id and str(entry_id) != INSTAGRAM_SENTINEL_ENTRY_ID:
        return str(entry_id)
    recipient_id = as_dict(event.get("recipient")).get("id")
    return str(recipient_id) if recipient_id else None


def adapt_change_to_messaging(value: dict[str, Any]) -> dict[str, Any]:
    """Adapta `changes[].value` do Instagram ao formato de `messaging[]`."""
    return {
        "sender": value.get("sender"),
        "recipient": value.get("recipient"),
        "timestamp": value.get("timestamp"),
        "message": value.get("message"),
    }


def route_webhook_payload(payload: Any) -> list[RoutingOutcome]:
    """Percorre o payload e devolve um resultado por evento folha.

    Args:
        payload: Corpo JSON do webhook já parseado

    Returns:
        Lista de RoutedEvent/IgnoredEvent na ordem do payload
    """
    if not isinstance(payload, dict):
        return [IgnoredEvent("payload_not_object")]

    raw_kind = payload.get("object")
    kind = parse_envelope_kind(raw_kind)
    if kind is None:
        return [IgnoredEvent("unsupported_object", kind=str(raw_kind) if raw_kind else None)]

    entries = as_list(payload.get("entry"))
    if entries is None:
        return [IgnoredEvent("malformed_entry_list", kind=kind.value)]

    router = _ENVELOPE_ROUTERS[kind]
    outcomes: list[RoutingOutcome] = []
    for entry in entries:
        if not isinstance(entry, dict):
            outcomes.append(IgnoredEvent("malformed_entry", kind=kind.value))
            continue
        outcomes.extend(router(entry))
    return outcomes


def _route_whatsapp_entry(entry: dict[str, Any]) -> list[RoutingOutcome]:
    kind = EnvelopeKind.WHATSAPP_BUSINESS_ACCOUNT.value
    platform = ENVELOPE_PLATFORMS[EnvelopeKind.WHATSAPP_BUSINESS_ACCOUNT]
    changes = as_list(entry.get("changes"))
    if changes is None:
        return [IgnoredEvent("malformed_changes", kind=kind)]

    outcomes: list[RoutingOutcome] = []
    for change in changes:
        value = as_dict(change).get("value")
        if not isinstance(value, dict) or not value:
            outcomes.append(IgnoredEvent("missing_value", kind=kind))
            continue

        phone_number_id = as_dict(value.get("metadata")).get("phone_number_id")
        phone_number_id = str(phone_number_id) if phone_number_id else None

        outcomes.extend(
            _route_items(
                value.get("statuses"),
                lambda status: RoutedEvent(
                    platform, phone_number_id, normalize_status(phone_number_id, status)
                ),
                "malformed_statuses",
                kind,
            )
        )
        outcomes.extend(
            _route_items(
                value.get("messages"),
                lambda raw: RoutedEvent(platform, phone_number_id, normalize_message(raw)),
                "malformed_messages",
                kind,
            )
        )
    return outcomes


def _route_items(
    items: Any,
    build: Callable[[dict[str, Any]], RoutedEvent],
    malformed_reason: str,
    kind: str,
) -> list[RoutingOutcome]:
    """Aplica `build` em cada item de um array opcional."""
    if items is None:
        return []
    if not isinstance(items, list):
        return [IgnoredEvent(malformed_reason, kind=kind)]
    return [
        build(item) if isinstance(item, dict) else IgnoredEvent(malformed_reason, kind=kind)
        for item in items
    ]


def _route_instagram_entry(entry: dict[str, Any]) -> list[RoutingOutcome]:
    kind = EnvelopeKind.INSTAGRAM.value
    messaging = as_list(entry.get("messaging"))
    if messaging is not None:
        return [_route_instagram_messaging(entry.get("id"), event) for event in messaging]

    changes = as_list(entry.get("changes"))
    if changes is not None:
        return [_route_instagram_change(entry.get("id"), change) for change in changes]

    return [IgnoredEvent("malformed_entry", kind=kind)]


def _route_instagram_messaging(entry_id: Any, event: Any) -> RoutingOutcome:
    kind = EnvelopeKind.INSTAGRAM.value
    platform = ENVELOPE_PLATFORMS[EnvelopeKind.INSTAGRAM]
    if not isinstance(event, dict):
        return IgnoredEvent("malformed_messaging_event", kind=kind)

    business_id = resolve_business_id(entry_id, event)
    if event.get("message"):
        return RoutedEvent(platform, business_id, normalize_message(event))
    if event.get("delivery") or event.get("read"):
        return RoutedEvent(platform, business_id, normalize_status(business_id, event))
    return IgnoredEvent("unsupported_messaging_event", kind=kind)


def _route_instagram_change(entry_id: Any, change: Any) -> RoutingOutcome:
    kind = EnvelopeKind.INSTAGRAM.value
    platform = ENVELOPE_PLATFORMS[EnvelopeKind.INSTAGRAM]
    change = as_dict(change)
    if change.get("field") != "messages":
        return IgnoredEvent("unsupported_change_field", kind=kind)

    event = adapt_change_to_messaging(as_dict(change.get("value")))
    business_id = resolve_business_id(entry_id, event)
    return RoutedEvent(platform, business_id, normalize_message(event))


_ENVELOPE_ROUTERS: dict[EnvelopeKind, Callable[[dict[str, Any]], list[RoutingOutcome]]] = {
    EnvelopeKind.WHATSAPP_BUSINESS_ACCOUNT: _route_whatsapp_entry,
    EnvelopeKind.INSTAGRAM: _route_instagram_entry,
}
