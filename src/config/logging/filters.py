"""Filter que injeta o contexto do processo em cada record.

Campos injetados:
- correlation_id: id da operação em curso (do ContextVar do host)
- service: nome do serviço (ex: fsm_engine)
- environment: ambiente de execução, quando configurado
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


def _no_correlation_id() -> str:
    return ""


class CorrelationIdFilter(logging.Filter):
    """Enriquece records com correlation_id, service e environment.

    Args:
        service_name: Valor do campo ``service``.
        correlation_id_getter: Fonte do correlation_id atual.
        environment: Valor do campo ``environment`` (omitido se None).
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
        environment: str | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._correlation_id_getter = correlation_id_getter or _no_correlation_id
        self._environment = environment

    def filter(self, record: logging.LogRecord) -> bool:
        """Nunca descarta; um correlation_id vindo de ``extra`` prevalece."""
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._correlation_id_getter()
        record.service = self._service_name
        if self._environment is not None:
            record.environment = self._environment
        return True
