"""Redis State Store — estado atual das máquinas em Redis.

Cada chave da máquina (``"<namespace>.current_state"``) recebe um
prefixo próprio no Redis para isolar o espaço de chaves.

Não oferece compare-and-swap: o único controle de concorrência é a
re-leitura do estado atual feita pela máquina antes de gravar.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.protocols.state_store import StateStoreProtocol
from utils.errors import RedisConnectionError

if TYPE_CHECKING:
    from redis import Redis

logger = logging.getLogger(__name__)

# Prefixo para namespace das chaves de estado
STATE_PREFIX = "fsm:"


class RedisStateStore(StateStoreProtocol):
    """Store de estado usando Redis.

    Args:
        redis_client: Cliente Redis síncrono
        ttl_seconds: TTL aplicado a cada escrita (None = sem expiração)
        key_prefix: Prefixo das chaves no Redis
    """

    def __init__(
        self,
        redis_client: Redis[bytes],
        ttl_seconds: int | None = None,
        key_prefix: str = STATE_PREFIX,
    ) -> None:
        self._redis = redis_client
        self._ttl_seconds = ttl_seconds
        self._prefix = key_prefix

    def _key(self, key: str) -> str:
        """Gera chave Redis com namespace."""
        return f"{self._prefix}{key}"

    def exists(self, key: str) -> bool:
        """Verifica se a chave existe no Redis."""
        try:
            return bool(self._redis.exists(self._key(key)))
        except Exception as exc:
            raise RedisConnectionError("Falha ao consultar estado no Redis") from exc

    def read(self, key: str) -> str | None:
        """Lê o valor da chave no Redis (None se ausente)."""
        try:
            data = self._redis.get(self._key(key))
        except Exception as exc:
            raise RedisConnectionError("Falha ao ler estado no Redis") from exc
        if data is None:
            return None
        return data.decode() if isinstance(data, bytes) else str(data)

    def write(self, key: str, value: str) -> bool:
        """Grava o valor no Redis, com TTL se configurado."""
        redis_key = self._key(key)
        try:
            if self._ttl_seconds is None:
                result = self._redis.set(redis_key, value)
            else:
                result = self._redis.setex(redis_key, self._ttl_seconds, value)
        except Exception as exc:
            raise RedisConnectionError("Falha ao gravar estado no Redis") from exc
        logger.debug("state_saved", extra={"key": redis_key, "ttl": self._ttl_seconds})
        return bool(result)

    def delete(self, key: str) -> bool:
        """Remove a chave do Redis."""
        try:
            result = self._redis.delete(self._key(key))
        except Exception as exc:
            raise RedisConnectionError("Falha ao remover estado no Redis") from exc
        return bool(result)
