"""Helpers de logging para chamadas à Graph API (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .meta_errors import MetaApiError

logger = logging.getLogger(__name__)


def log_meta_error(
    meta_error: MetaApiError,
    platform: str,
    business_id: str,
) -> None:
    """Loga erro da Graph API sem tokens nem conteúdo de mensagem."""
    logger.warning(
        "meta_api_error",
        extra={
            "platform": platform,
            "business_id": business_id,
            "error_type": meta_error.error_type,
            "error_code": meta_error.error_code,
            "error_message": meta_error.error_message,
            "fbtrace_id": meta_error.fbtrace_id,
        },
    )


def log_success(
    platform: str,
    business_id: str,
    action: str,
    status_code: int,
) -> None:
    """Loga chamada bem-sucedida."""
    logger.info(
        "meta_api_call_succeeded",
        extra={
            "platform": platform,
            "business_id": business_id,
            "action": action,
            "status_code": status_code,
        },
    )
