"""Stores — implementações concretas de StateStoreProtocol.

Módulos disponíveis:
    - redis_state_store: Store de estado usando Redis
    - memory_stores: Store em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryStateStore
from app.infra.stores.redis_state_store import RedisStateStore

__all__ = [
    # Memory (dev/test)
    "MemoryStateStore",
    # Redis
    "RedisStateStore",
]
