"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.core import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.base.state_store import (
    StateStoreBackend,
    StateStoreSettings,
    get_state_store_settings,
)

__all__ = [
    # Core
    "BaseSettings",
    # Types
    "Environment",
    "StateStoreBackend",
    # State store
    "StateStoreSettings",
    "get_base_settings",
    "get_state_store_settings",
]
