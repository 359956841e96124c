"""Settings do state store.

Configurações do backend onde o estado atual das máquinas é persistido.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

StateStoreBackend = Literal["memory", "redis"]


@dataclass(frozen=True)
class StateStoreSettings:
    """Configurações do state store.

    Attributes:
        backend: Backend de armazenamento (memory|redis)
        ttl_seconds: TTL de cada chave gravada (None = sem expiração)
        key_prefix: Prefixo das chaves no Redis
    """

    backend: StateStoreBackend = "memory"
    ttl_seconds: int | None = None
    key_prefix: str = "fsm:"

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações do state store.

        Args:
            base: BaseSettings para verificar ambiente.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        valid_backends = {"memory", "redis"}
        if self.backend not in valid_backends:
            errors.append(f"STATE_STORE_BACKEND inválido: {self.backend}")

        if self.backend == "memory" and not base.is_development:
            errors.append("STATE_STORE_BACKEND=memory proibido em staging/production")

        if self.backend == "redis" and not base.redis_url:
            errors.append("STATE_STORE_BACKEND=redis requer REDIS_URL configurado")

        if self.ttl_seconds is not None and self.ttl_seconds <= 0:
            errors.append("STATE_STORE_TTL_SECONDS deve ser > 0")

        return errors


def _parse_optional_int(raw: str | None) -> int | None:
    """Converte texto de env em int, tratando vazio como ausente."""
    if raw is None or not raw.strip():
        return None
    return int(raw)


def _load_state_store_from_env() -> StateStoreSettings:
    """Carrega StateStoreSettings de variáveis de ambiente."""
    backend_str = os.getenv("STATE_STORE_BACKEND", "memory").lower()
    backend: StateStoreBackend = backend_str if backend_str in ("memory", "redis") else "memory"
    return StateStoreSettings(
        backend=backend,
        ttl_seconds=_parse_optional_int(os.getenv("STATE_STORE_TTL_SECONDS")),
        key_prefix=os.getenv("STATE_STORE_KEY_PREFIX", "fsm:"),
    )


@lru_cache(maxsize=1)
def get_state_store_settings() -> StateStoreSettings:
    """Retorna instância cacheada de StateStoreSettings."""
    return _load_state_store_from_env()
