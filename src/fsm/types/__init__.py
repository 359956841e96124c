"""
Exports públicos do módulo fsm/types.

Tipos e estruturas de dados da máquina de estados.
"""

from fsm.types.action_owner import (
    ActionOwner,
    Leaf,
    Nested,
    build_action_owner,
    first_leaf,
    owns_action,
)
from fsm.types.machine_config import (
    DEFAULT_NAMESPACE,
    MachineConfig,
    load_machine_config,
)
from fsm.types.transition import AccessResult, StateTransition

__all__ = [
    "DEFAULT_NAMESPACE",
    "AccessResult",
    "ActionOwner",
    "Leaf",
    "MachineConfig",
    "Nested",
    "StateTransition",
    "build_action_owner",
    "first_leaf",
    "load_machine_config",
    "owns_action",
]
