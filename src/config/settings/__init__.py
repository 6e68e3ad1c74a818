"""Agregador de settings da ponte de webhooks Meta.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.meta import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    MetaSettings,
    get_meta_settings,
)

__all__ = [
    # Constants
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    # Base
    "BaseSettings",
    "Environment",
    # Channels
    "MetaSettings",
    "get_base_settings",
    "get_meta_settings",
]
