"""Testes do RedisStateStore com mock."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from app.infra.stores.redis_state_store import STATE_PREFIX, RedisStateStore
from utils.errors import InfrastructureError, RedisConnectionError


class TestRedisStateStore:
    """Testes do RedisStateStore (API síncrona)."""

    def test_write_without_ttl_calls_set(self) -> None:
        """Sem TTL deve chamar set com a chave prefixada."""
        mock_redis = MagicMock()
        mock_redis.set.return_value = True
        store = RedisStateStore(mock_redis)

        assert store.write("StateMachine.current_state", "review") is True

        mock_redis.set.assert_called_once_with("fsm:StateMachine.current_state", "review")
        mock_redis.setex.assert_not_called()

    def test_write_with_ttl_calls_setex(self) -> None:
        mock_redis = MagicMock()
        mock_redis.setex.return_value = True
        store = RedisStateStore(mock_redis, ttl_seconds=1800, key_prefix="wf:")

        assert store.write("doc.current_state", "draft") is True

        mock_redis.setex.assert_called_once_with("wf:doc.current_state", 1800, "draft")

    def test_write_reports_refused_set(self) -> None:
        mock_redis = MagicMock()
        mock_redis.set.return_value = None
        store = RedisStateStore(mock_redis)

        assert store.write("k", "v") is False

    def test_read_decodes_bytes(self) -> None:
        mock_redis = MagicMock()
        mock_redis.get.return_value = b"review"
        store = RedisStateStore(mock_redis)

        assert store.read("StateMachine.current_state") == "review"
        mock_redis.get.assert_called_once_with(f"{STATE_PREFIX}StateMachine.current_state")

    def test_read_accepts_decoded_client(self) -> None:
        mock_redis = MagicMock()
        mock_redis.get.return_value = "review"
        store = RedisStateStore(mock_redis)

        assert store.read("k") == "review"

    def test_read_missing_returns_none(self) -> None:
        mock_redis = MagicMock()
        mock_redis.get.return_value = None
        store = RedisStateStore(mock_redis)

        assert store.read("missing") is None

    def test_exists_and_delete(self) -> None:
        mock_redis = MagicMock()
        mock_redis.exists.return_value = 1
        mock_redis.delete.return_value = 0
        store = RedisStateStore(mock_redis)

        assert store.exists("k") is True
        assert store.delete("k") is False
        mock_redis.exists.assert_called_once_with("fsm:k")
        mock_redis.delete.assert_called_once_with("fsm:k")

    @pytest.mark.parametrize("method", ["exists", "read", "delete"])
    def test_client_failures_are_wrapped(self, method: str) -> None:
        """Falhas do cliente viram RedisConnectionError com a causa encadeada."""
        mock_redis = MagicMock()
        cause = ConnectionError("down")
        getattr(mock_redis, "get" if method == "read" else method).side_effect = cause
        store = RedisStateStore(mock_redis)

        with pytest.raises(RedisConnectionError) as exc_info:
            getattr(store, method)("k")

        assert exc_info.value.__cause__ is cause
        assert isinstance(exc_info.value, InfrastructureError)

    def test_write_failure_is_wrapped(self) -> None:
        mock_redis = MagicMock()
        mock_redis.set.side_effect = TimeoutError("slow")
        store = RedisStateStore(mock_redis)

        with pytest.raises(RedisConnectionError, match="gravar"):
            store.write("k", "v")

    def test_machine_over_redis_store(self) -> None:
        """Máquina usa o store Redis sem conhecer o prefixo."""
        from fsm import create_fsm

        data: dict[str, bytes] = {"fsm:StateMachine.current_state": b"draft"}
        mock_redis = MagicMock()
        mock_redis.exists.side_effect = lambda key: int(key in data)
        mock_redis.get.side_effect = data.get

        def _set(key: str, value: str) -> bool:
            data[key] = value.encode()
            return True

        mock_redis.set.side_effect = _set
        machine = create_fsm(
            {"states": {"draft": "edit", "review": "approve"},
             "transitions": {"submit": {"draft": "review"}}},
            store=RedisStateStore(mock_redis),
        )

        assert machine.fire_event("submit") is True
        assert data["fsm:StateMachine.current_state"] == b"review"
        assert data["fsm:StateMachine.destination_state"] == b"review"
        assert machine.current_state() == "review"
