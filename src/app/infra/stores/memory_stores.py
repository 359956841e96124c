"""Stores em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

from app.protocols.state_store import StateStoreProtocol


class MemoryStateStore(StateStoreProtocol):
    """Store chave-valor em memória — apenas para dev/test."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._store: dict[str, str] = dict(initial or {})

    def exists(self, key: str) -> bool:
        """Verifica se a chave existe."""
        return key in self._store

    def read(self, key: str) -> str | None:
        """Lê o valor da chave (None se ausente)."""
        return self._store.get(key)

    def write(self, key: str, value: str) -> bool:
        """Grava o valor em memória."""
        self._store[key] = value
        return True

    def delete(self, key: str) -> bool:
        """Remove a chave da memória."""
        if key in self._store:
            del self._store[key]
            return True
        return False

    def snapshot(self) -> dict[str, str]:
        """Cópia do conteúdo atual (apenas para testes)."""
        return dict(self._store)
