"""Settings base do serviço: ambiente, logging e conexão Redis."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from config.logging.config import VALID_LOG_LEVELS

Environment = Literal["development", "staging", "production"]

# Ambientes onde settings inválidas impedem o boot
STRICT_ENVIRONMENTS = frozenset({"staging", "production"})

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "production": "production",
    "prod": "production",
    "staging": "staging",
    "stage": "staging",
}


@dataclass(frozen=True)
class BaseSettings:
    """Configurações compartilhadas por todas as máquinas do processo.

    Attributes:
        environment: development|staging|production
        service_name: Valor do campo ``service`` nos logs
        debug: Modo debug ativo
        log_level: Nível aplicado por configure_logging
        redis_url: URL do Redis usado pelo state store
    """

    environment: Environment = "development"
    service_name: str = "fsm_engine"
    debug: bool = False
    log_level: str = "INFO"
    redis_url: str = ""

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_strict(self) -> bool:
        """True em staging/production (validação bloqueia o boot)."""
        return self.environment in STRICT_ENVIRONMENTS

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")
        return errors


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    environment = os.getenv("ENVIRONMENT", "development").lower()
    return BaseSettings(
        environment=_ENVIRONMENT_ALIASES.get(environment, "development"),
        service_name=os.getenv("SERVICE_NAME", "fsm_engine"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        redis_url=os.getenv("REDIS_URL", ""),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
