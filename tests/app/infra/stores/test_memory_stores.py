"""Testes do store em memória."""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryStateStore
from app.protocols import StateStoreProtocol


class TestMemoryStateStore:
    """Testes do MemoryStateStore."""

    def test_implements_protocol(self) -> None:
        assert isinstance(MemoryStateStore(), StateStoreProtocol)

    def test_write_and_read(self) -> None:
        """Deve gravar e ler o valor."""
        store = MemoryStateStore()

        assert store.write("StateMachine.current_state", "draft") is True
        assert store.read("StateMachine.current_state") == "draft"
        assert store.exists("StateMachine.current_state") is True

    def test_read_missing_returns_none(self) -> None:
        store = MemoryStateStore()

        assert store.read("missing") is None
        assert store.exists("missing") is False

    def test_write_overwrites(self) -> None:
        store = MemoryStateStore({"k": "old"})
        store.write("k", "new")
        assert store.read("k") == "new"

    def test_delete_removes_key(self) -> None:
        store = MemoryStateStore({"k": "v"})

        assert store.delete("k") is True
        assert store.exists("k") is False
        assert store.delete("k") is False  # Já deletado

    def test_snapshot_is_a_copy(self) -> None:
        initial = {"k": "v"}
        store = MemoryStateStore(initial)

        snapshot = store.snapshot()
        snapshot["other"] = "x"
        store.write("k2", "v2")

        assert initial == {"k": "v"}
        assert store.snapshot() == {"k": "v", "k2": "v2"}
