"""
Exports públicos do módulo fsm/transitions.

Tabela de transições derivada das declarações por evento.
"""

from fsm.transitions.rules import (
    TransitionDeclarations,
    TransitionMap,
    build_reachability,
    get_valid_targets,
    is_transition_valid,
    list_events,
    validate_transition_map,
)

__all__ = [
    "TransitionDeclarations",
    "TransitionMap",
    "build_reachability",
    "get_valid_targets",
    "is_transition_valid",
    "list_events",
    "validate_transition_map",
]
