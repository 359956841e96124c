"""
Configuração declarativa de uma máquina de estados.

Enumera exatamente as opções reconhecidas; chaves desconhecidas são
rejeitadas na construção. Nenhuma validação semântica (estados citados
nas transições, default declarado) é feita aqui: isso fica a cargo de
validate_transition_map(), chamado no startup da máquina.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from fsm.types.action_owner import build_action_owner
from utils.errors import InvalidMachineConfigError

DEFAULT_NAMESPACE = "StateMachine"


class MachineConfig(BaseModel):
    """Opções da máquina de estados."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    states: dict[str, Any] = Field(
        default_factory=dict,
        description="Estado -> ação (str), várias ações (lista) ou sub-estados (mapping).",
    )
    transitions: dict[str, dict[str, str]] = Field(
        default_factory=dict,
        description="Evento -> {estado de origem: estado de destino}.",
    )
    default: str | None = Field(
        default=None,
        description="Estado padrão; se ausente, usa o primeiro estado declarado.",
    )
    namespace: str = Field(
        default=DEFAULT_NAMESPACE,
        min_length=1,
        description="Prefixo das chaves no state store.",
    )
    auto: bool = Field(
        default=False,
        description="Redireciona para o estado de destino após fire_event.",
    )

    @field_validator("states")
    @classmethod
    def _check_action_shapes(cls, value: dict[str, Any]) -> dict[str, Any]:
        for state, actions in value.items():
            build_action_owner(actions, f"[{state!r}]")
        return value


def load_machine_config(settings: MachineConfig | Mapping[str, Any]) -> MachineConfig:
    """
    Constrói MachineConfig a partir de um mapping de opções.

    Args:
        settings: Opções (states, transitions, default, namespace, auto)
            ou uma MachineConfig já construída (retornada como está)

    Returns:
        MachineConfig validada

    Raises:
        InvalidMachineConfigError: Chave desconhecida ou valor com formato inválido
    """
    if isinstance(settings, MachineConfig):
        return settings
    try:
        return MachineConfig.model_validate(dict(settings))
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
            for error in exc.errors()
        )
        raise InvalidMachineConfigError(
            f"Configuração da máquina inválida: {problems}"
        ) from exc
