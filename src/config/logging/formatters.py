"""Formatters de logging estruturado.

Define o formatter JSON com os campos obrigatórios de todo log.
Campos passados via ``extra`` (namespace, from_state, to_state, ...)
são anexados ao JSON pelo próprio JsonFormatter.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Returns:
        JsonFormatter configurado para logs estruturados.

    Exemplo de output:
        {
            "asctime": "2026-02-02 10:30:00,123",
            "level": "INFO",
            "logger": "fsm.manager.machine",
            "message": "fsm_transition_applied",
            "correlation_id": "abc-123",
            "service": "fsm_engine",
            "from_state": "draft",
            "to_state": "review"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
