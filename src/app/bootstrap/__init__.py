"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_state_store

    # Na inicialização do serviço
    initialize_app()

    # Obter store compartilhado entre máquinas
    state_store = get_state_store()
"""

from __future__ import annotations

import logging
from functools import lru_cache

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_state_store_settings

# Nome do serviço para logs
SERVICE_NAME = "fsm_engine"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação.

    Deve ser chamada uma vez no início do serviço.

    Configura:
    - Logging estruturado JSON com correlation_id
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name or SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
        environment=base.environment,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (nível DEBUG)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Se houver erros em ambiente estrito
    """
    base = get_base_settings()
    strict_mode = base.is_strict
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(
        f"state_store: {error}" for error in get_state_store_settings().validate(base)
    )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_state_store():
    """Obtém state store (singleton).

    Returns:
        StateStoreProtocol configurado conforme env
    """
    from app.bootstrap.dependencies import create_state_store
    return create_state_store()
