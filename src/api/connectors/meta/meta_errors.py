"""Erros e helpers de parsing para a Graph API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class MetaApiError:
    """Erro retornado pela Graph API no envelope {"error": {...}}."""

    error_type: str
    error_code: int
    error_message: str
    fbtrace_id: str | None = None


def parse_meta_error(
    response_data: Any,
    status_code: int | None = None,
) -> MetaApiError | None:
    """Extrai o erro de uma resposta da Graph API.

    Args:
        response_data: JSON da resposta
        status_code: Status HTTP, usado quando o corpo não traz "error"

    Returns:
        MetaApiError se houver erro, None se sucesso
    """
    error_obj = response_data.get("error") if isinstance(response_data, dict) else None
    if isinstance(error_obj, dict):
        return MetaApiError(
            error_type=str(error_obj.get("type", "unknown")),
            error_code=int(error_obj.get("code", status_code or 0)),
            error_message=str(error_obj.get("message", "Erro desconhecido")),
            fbtrace_id=error_obj.get("fbtrace_id"),
        )

    if status_code is not None and status_code >= 400:
        return MetaApiError(
            error_type="http_error",
            error_code=status_code,
            error_message=f"HTTP {status_code}",
        )
    return None
