"""Protocolos e contratos dos colaboradores externos da máquina de estados."""

from .notifier import NotifierProtocol
from .state_store import StateStoreProtocol

__all__ = [
    "NotifierProtocol",
    "StateStoreProtocol",
]
