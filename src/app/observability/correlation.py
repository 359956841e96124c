"""correlation_id das operações da máquina de estados.

O host define o correlation_id ao receber a ação corrente; todos os
logs emitidos por start/transition/fire_event dentro do mesmo contexto
carregam o mesmo id (injetado pelo CorrelationIdFilter).

Uso:
    from app.observability import correlation_scope

    with correlation_scope(request_id):
        machine.start(action)
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str] = ContextVar("fsm_correlation_id", default="")


def get_correlation_id() -> str:
    """correlation_id do contexto atual ("" fora de um escopo)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; gera um UUID v4 quando vazio.

    Returns:
        Token para reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or str(uuid.uuid4()))


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id anterior ao set correspondente."""
    _correlation_id.reset(token)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Escopo com correlation_id definido, restaurado na saída.

    Args:
        correlation_id: Id recebido do host (None gera um novo)

    Yields:
        O correlation_id em vigor dentro do escopo
    """
    token = set_correlation_id(correlation_id)
    try:
        yield _correlation_id.get()
    finally:
        reset_correlation_id(token)
