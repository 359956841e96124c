"""
Módulo FSM — máquina de estados finita plana.

Estados nomeados possuem ações externas; eventos declaram arestas
origem → destino. A máquina valida o acesso à ação corrente, executa
transições e dispara eventos, com o estado atual persistido em um
store externo.

Estrutura:
    - states/: Diretório de estados e resolução de ações
    - transitions/: Tabela de alcançabilidade derivada dos eventos
    - rules/: Guards avaliados antes de cada transição
    - manager/: Máquina de estados (FSMStateMachine)
    - types/: Configuração, donos de ação e registros de transição
"""

# Manager
from fsm.manager import (
    CURRENT_STATE_SUFFIX,
    DESTINATION_STATE_SUFFIX,
    FSMStateMachine,
    create_fsm,
)

# Guards
from fsm.rules import (
    GuardResult,
    TransitionContext,
    evaluate_guards,
)

# Estados
from fsm.states import StateDirectory

# Transições
from fsm.transitions import (
    TransitionMap,
    build_reachability,
    get_valid_targets,
    is_transition_valid,
    list_events,
    validate_transition_map,
)

# Types
from fsm.types import (
    DEFAULT_NAMESPACE,
    AccessResult,
    ActionOwner,
    Leaf,
    MachineConfig,
    Nested,
    StateTransition,
    load_machine_config,
)

__all__ = [
    "CURRENT_STATE_SUFFIX",
    "DEFAULT_NAMESPACE",
    "DESTINATION_STATE_SUFFIX",
    # Types
    "AccessResult",
    "ActionOwner",
    # Manager
    "FSMStateMachine",
    # Guards
    "GuardResult",
    "Leaf",
    "MachineConfig",
    "Nested",
    # Estados
    "StateDirectory",
    "StateTransition",
    "TransitionContext",
    # Transições
    "TransitionMap",
    "build_reachability",
    "create_fsm",
    "evaluate_guards",
    "get_valid_targets",
    "is_transition_valid",
    "list_events",
    "load_machine_config",
    "validate_transition_map",
]
