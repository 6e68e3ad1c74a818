"""Testes para config.logging.

Cobre: configure_logging, log_fallback, CorrelationIdFilter e os
formatters JSON/texto.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    create_plain_formatter,
    log_fallback,
)
from config.logging.config import DEFAULT_SERVICE_NAME


def _record(msg: str = "webhook_received", name: str = "api.routes.meta.webhook"):
    return logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [("INFO", logging.INFO), ("debug", logging.DEBUG), ("ERROR", logging.ERROR)],
    )
    def test_sets_root_level(self, level: str, expected: int) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_replaces_existing_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]

        configure_logging()

        assert len(root.handlers) == 1
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)

    def test_plain_output_uses_text_formatter(self) -> None:
        configure_logging(json_output=False)

        formatter = logging.getLogger().handlers[0].formatter
        assert not formatter.__class__.__name__.startswith("Json")

    def test_quiets_http_client_loggers(self) -> None:
        configure_logging(level="DEBUG")

        assert logging.getLogger("httpx").level == logging.WARNING

    def test_default_service_name(self) -> None:
        assert DEFAULT_SERVICE_NAME == "meta_webhook_bridge"


class TestLogFallback:
    """Testes para log_fallback."""

    def test_logs_component_lazily(self) -> None:
        logger = MagicMock(spec=logging.Logger)

        log_fallback(logger, "reply_catalog")

        args, kwargs = logger.info.call_args
        assert args == ("Fallback applied for %s", "reply_catalog")
        assert kwargs["extra"] == {"fallback_used": True, "component": "reply_catalog"}

    def test_includes_reason(self) -> None:
        logger = MagicMock(spec=logging.Logger)

        log_fallback(logger, "reply_catalog", reason="unhandled_type:whatsapp")

        assert logger.info.call_args[1]["extra"]["reason"] == "unhandled_type:whatsapp"


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_injects_correlation_id_and_service(self) -> None:
        filter_ = CorrelationIdFilter("meta_webhook_bridge", lambda: "corr-123")
        record = _record()

        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "meta_webhook_bridge"

    def test_preserves_explicit_correlation_id(self) -> None:
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"

        filter_.filter(record)

        assert record.correlation_id == "explicit-id"

    def test_injects_environment_when_given(self) -> None:
        record = _record()

        CorrelationIdFilter("svc", environment="staging").filter(record)

        assert record.environment == "staging"

    def test_empty_correlation_id_without_getter(self) -> None:
        record = _record()

        CorrelationIdFilter("svc").filter(record)

        assert record.correlation_id == ""


class TestFormatters:
    """Testes para os formatters."""

    def test_json_output_renames_fields(self) -> None:
        record = _record()
        record.correlation_id = "abc-123"
        record.service = "meta_webhook_bridge"
        record.payload_size = 512

        output = json.loads(create_json_formatter().format(record))

        assert output["message"] == "webhook_received"
        assert output["level"] == "INFO"
        assert output["logger"] == "api.routes.meta.webhook"
        assert output["correlation_id"] == "abc-123"
        assert output["payload_size"] == 512

    def test_required_fields(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        }
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_plain_formatter_includes_context(self) -> None:
        record = _record()
        record.correlation_id = "abc-123"
        record.service = "svc"

        output = create_plain_formatter().format(record)

        assert "[svc:abc-123]" in output
        assert output.endswith("api.routes.meta.webhook: webhook_received")
