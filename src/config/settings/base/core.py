"""Settings do processo: ambiente, identificação e logging."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]
LogFormat = Literal["json", "plain"]

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "production": "production",
    "prod": "production",
    "staging": "staging",
    "stage": "staging",
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class BaseSettings:
    """Configurações do processo.

    Attributes:
        environment: development | staging | production
        service_name: Campo `service` dos logs
        log_level: Nível do root logger
        log_format: "json" (padrão) ou "plain"
        port: Porta HTTP
    """

    environment: Environment = "development"
    service_name: str = "meta_webhook_bridge"
    log_level: str = "INFO"
    log_format: LogFormat = "json"
    port: int = 8080

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def json_logs(self) -> bool:
        return self.log_format == "json"

    def validate(self) -> list[str]:
        """Lista problemas de configuração (vazia = OK)."""
        checks = (
            (bool(self.service_name), "SERVICE_NAME não pode ser vazio"),
            (self.log_level in _LOG_LEVELS, f"LOG_LEVEL inválido: {self.log_level}"),
            (self.log_format in ("json", "plain"), f"LOG_FORMAT inválido: {self.log_format}"),
            (0 < self.port < 65536, f"PORT fora do intervalo válido: {self.port}"),
        )
        return [message for ok, message in checks if not ok]


def parse_environment(env_str: str) -> Environment:
    """Normaliza ENVIRONMENT; valores desconhecidos viram development."""
    return _ENVIRONMENT_ALIASES.get(env_str.strip().lower(), "development")


def _load_base_from_env() -> BaseSettings:
    log_format = os.getenv("LOG_FORMAT", "json").strip().lower()
    return BaseSettings(
        environment=parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "meta_webhook_bridge"),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        log_format="plain" if log_format == "plain" else "json",
        port=int(os.getenv("PORT", "8080")),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """BaseSettings carregado do ambiente uma única vez."""
    return _load_base_from_env()
