"""Agregador de settings do serviço.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    StateStoreBackend,
    StateStoreSettings,
    get_base_settings,
    get_state_store_settings,
)

__all__ = [
    "BaseSettings",
    "Environment",
    "StateStoreBackend",
    "StateStoreSettings",
    "get_base_settings",
    "get_state_store_settings",
]
