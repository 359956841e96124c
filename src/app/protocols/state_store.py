"""Protocolo de domínio para persistência do estado atual da máquina."""

from __future__ import annotations

from abc import ABC, abstractmethod


class StateStoreProtocol(ABC):
    """Contrato mínimo síncrono de armazenamento chave-valor.

    As chaves usadas pela máquina são ``"<namespace>.current_state"`` e
    ``"<namespace>.destination_state"``. A implementação não precisa
    conhecer esse formato.
    """

    @abstractmethod
    def exists(self, key: str) -> bool: ...

    @abstractmethod
    def read(self, key: str) -> str | None: ...

    @abstractmethod
    def write(self, key: str, value: str) -> bool:
        """Grava o valor e retorna True em caso de sucesso."""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove a chave; retorna True se ela existia."""
